"""Preview rendering pipeline."""

import logging
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from ..config import LOG_ACTION_RENDER_PREVIEWS, LOG_ACTION_RUN_STARTED
from ..errors import (
    ArtworkNotFoundError,
    InputResolutionError,
    PreviewDestructionError,
    RenderSubmitError,
    RunInProgressError,
    UnknownJobError,
)
from ..models import (
    Artwork,
    DispatchedJob,
    IntegrationLogEntry,
    JobStatus,
    JobStatusReport,
    Preview,
    RenderJobHandle,
    RenderRun,
    Template,
    TemplateCategory,
    TemplateFailure,
)
from ..services import (
    CompositionService,
    OrderCounter,
    StatusPoller,
    SynthesizedPhotoAppender,
    TemplateSelector,
)
from ..stores import ArtworkRepository, IntegrationLog

logger = logging.getLogger(__name__)


class PreviewPipeline:
    """
    Regenerate an artwork's previews.

    Each run:
    1. Destroys the existing previews
    2. Dispatches one composition per template, batch by batch:
       standard -> mockup -> model_mockup -> marketing
    3. Appends the product details (order 8) and sizing (order 7) photos

    Composited previews appear later, when the rendering service calls back
    (see complete_job). Per-template failures are recorded, never raised.
    """

    def __init__(
        self,
        repository: ArtworkRepository,
        integration_log: IntegrationLog,
        composition: CompositionService,
        status_poller: StatusPoller,
        dispatch_workers: int = 1,
    ):
        self.repository = repository
        self.integration_log = integration_log
        self.composition = composition
        self.status_poller = status_poller
        self.dispatch_workers = dispatch_workers
        self.selector = TemplateSelector(repository)
        self.appender = SynthesizedPhotoAppender(repository)
        self._runs: dict[int, RenderRun] = {}
        self._locks: dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # ===== Run =====

    def run(self, artwork_id: int, wait: bool = True) -> RenderRun:
        """
        Run the full pipeline for one artwork.

        Args:
            artwork_id: Artwork to regenerate previews for.
            wait: Block until an in-flight run for the same artwork finishes.
                If False, raise RunInProgressError instead.

        Raises:
            ArtworkNotFoundError: Unknown artwork.
            PreviewDestructionError: Old previews could not be cleared.
            RunInProgressError: Another run is in flight and wait is False.
        """
        lock = self._lock_for(artwork_id)
        if not lock.acquire(blocking=wait):
            raise RunInProgressError(f"Artwork {artwork_id} is already rendering")
        try:
            return self._run(artwork_id)
        finally:
            lock.release()

    def _lock_for(self, artwork_id: int) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(artwork_id, threading.Lock())

    def _run(self, artwork_id: int) -> RenderRun:
        artwork = self.repository.get_artwork(artwork_id)
        if artwork is None:
            raise ArtworkNotFoundError(f"Artwork {artwork_id} not found")

        run = RenderRun(run_id=uuid.uuid4().hex, artwork_id=artwork.id)
        # Marker goes first so callbacks from the previous run count as stale
        # in every process from here on
        self.integration_log.record(
            IntegrationLogEntry(
                action=LOG_ACTION_RUN_STARTED,
                artwork_id=artwork.id,
                template_id=None,
                run_id=run.run_id,
            )
        )
        self._runs[artwork.id] = run

        self._destroy_previews(artwork)

        counter = OrderCounter()

        batches = self.selector.select(artwork.id)
        logger.info(f"Artwork {artwork.id}: dispatching {len(batches)} templates (run {run.run_id})")

        for category, templates in batches.in_dispatch_order():
            if templates:
                logger.info(f"Artwork {artwork.id}: {category.value} batch, {len(templates)} templates")
            self._dispatch_batch(run, artwork, category, templates, counter)

        run.synthesized.append(self.appender.append_product_details(artwork))
        run.synthesized.append(self.appender.append_sizing_photo(artwork))

        logger.info(
            f"Artwork {artwork.id}: {len(run.jobs)} jobs dispatched, {len(run.failures)} failed"
        )
        return run

    def _destroy_previews(self, artwork: Artwork) -> None:
        try:
            self.repository.destroy_previews(artwork.id)
        except Exception as e:
            raise PreviewDestructionError(f"Could not clear previews of artwork {artwork.id}: {e}") from e

        remaining = self.repository.list_previews(artwork.id)
        if remaining:
            raise PreviewDestructionError(
                f"Artwork {artwork.id} still has {len(remaining)} previews after destroy"
            )

    def _dispatch_batch(
        self,
        run: RenderRun,
        artwork: Artwork,
        category: TemplateCategory,
        templates: list[Template],
        counter: OrderCounter,
    ) -> None:
        """Assign orders in template order, then submit (optionally in parallel)."""
        pending: list[tuple[Template, int, str]] = []
        for template in templates:
            try:
                artwork_input = self.composition.resolve_input(artwork, template)
            except InputResolutionError as e:
                logger.error(f"Skipping template {template.id}: {e}")
                self.composition.record_failure(artwork.id, template.id, str(e), run.run_id)
                run.failures.append(TemplateFailure(template.id, category, str(e)))
                continue

            pending.append((template, counter.next_for(template), artwork_input))

        if self.dispatch_workers > 1 and len(pending) > 1:
            with ThreadPoolExecutor(max_workers=self.dispatch_workers) as executor:
                outcomes = list(executor.map(
                    lambda item: self._dispatch_one(artwork, *item, run.run_id), pending
                ))
        else:
            outcomes = [self._dispatch_one(artwork, *item, run.run_id) for item in pending]

        for (template, order, _), (handle, error) in zip(pending, outcomes):
            if handle is None:
                run.failures.append(TemplateFailure(template.id, category, error, order=order))
            else:
                run.jobs.append(DispatchedJob(template.id, category, order, handle))

    def _dispatch_one(
        self, artwork: Artwork, template: Template, order: int, artwork_input: str, run_id: str
    ) -> tuple[RenderJobHandle | None, str | None]:
        try:
            handle = self.composition.dispatch(
                template, artwork, order, template.for_marketing, run_id, artwork_input=artwork_input
            )
            return handle, None
        except RenderSubmitError as e:
            logger.error(f"Template {template.id} not dispatched: {e}")
            return None, str(e)

    # ===== Status =====

    def job_statuses(self, artwork_id: int) -> list[JobStatusReport]:
        """Current status of every job the artwork's last run dispatched."""
        return self.status_poller.check_all(self._last_run_handles(artwork_id))

    def _last_run_handles(self, artwork_id: int) -> list[RenderJobHandle]:
        run = self._runs.get(artwork_id)
        if run is not None and run.run_id == self._current_run_id(artwork_id):
            return run.handles

        # Last run happened in another process - rebuild from the integration log
        return [
            RenderJobHandle(job_id=entry.job_id)
            for entry in self._last_run_entries(artwork_id)
            if entry.job_id
        ]

    def _current_run_id(self, artwork_id: int) -> str | None:
        """Latest run started for the artwork, by any process."""
        markers = self.integration_log.entries_for(artwork_id, LOG_ACTION_RUN_STARTED)
        if markers:
            return markers[-1].run_id
        run = self._runs.get(artwork_id)
        if run is not None:
            return run.run_id
        entries = self.integration_log.entries_for(artwork_id, LOG_ACTION_RENDER_PREVIEWS)
        return entries[-1].run_id if entries else None

    def _last_run_entries(self, artwork_id: int) -> list[IntegrationLogEntry]:
        run_id = self._current_run_id(artwork_id)
        return [
            entry
            for entry in self.integration_log.entries_for(artwork_id, LOG_ACTION_RENDER_PREVIEWS)
            if entry.run_id == run_id
        ]

    def complete_job(
        self,
        job_id: str,
        status: JobStatus,
        image_url: str | None = None,
        metadata: dict[str, Any] | None = None,
        error: str | None = None,
    ) -> Preview | None:
        """
        Handle the rendering service's completion callback for one job.

        Returns:
            The created Preview, or None for failed, pending or stale jobs.

        Raises:
            UnknownJobError: The job was never dispatched.
        """
        entry = self.integration_log.find_by_job(job_id)
        if entry is None:
            raise UnknownJobError(f"Unknown render job {job_id}")

        if entry.run_id != self._current_run_id(entry.artwork_id):
            logger.warning(f"Ignoring job {job_id} from superseded run {entry.run_id}")
            return None

        if status == JobStatus.FAILED:
            logger.warning(f"Render job {job_id} for template {entry.template_id} failed: {error}")
            self.integration_log.mark(job_id, JobStatus.FAILED, error)
            return None

        if status != JobStatus.COMPLETE:
            return None

        if not image_url:
            raise ValueError(f"Completed job {job_id} has no image_url")

        metadata = metadata or {}
        order = metadata.get("order")
        preview = self.repository.create_preview(
            entry.artwork_id,
            image_url,
            order=int(order) if order is not None else None,
            for_marketing=str(metadata.get("for_marketing", "false")).lower() == "true",
            params={"template_id": entry.template_id, "job_id": job_id},
        )
        self.integration_log.mark(job_id, JobStatus.COMPLETE)
        return preview

    # ===== Queries =====

    def failed_template_ids(self, artwork_id: int) -> list[int]:
        """Templates of the last run whose composition failed, in dispatch order."""
        return [
            entry.template_id
            for entry in self._last_run_entries(artwork_id)
            if entry.status == JobStatus.FAILED
        ]

    def previews_in_order(self, artwork_id: int) -> list[Preview]:
        """Customer-facing previews sorted by position, marketing ones excluded."""
        previews = [
            p for p in self.repository.list_previews(artwork_id)
            if p.order is not None and not p.for_marketing
        ]
        return sorted(previews, key=lambda p: p.order)

    def marketing_previews(self, artwork_id: int) -> list[Preview]:
        return [p for p in self.repository.list_previews(artwork_id) if p.for_marketing]
