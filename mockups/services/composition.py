"""Composition service - artwork + template -> render job on the rendering service."""

import logging
import time

from ..clients.render import RenderClient
from ..config import LOG_ACTION_RENDER_PREVIEWS, required_sizes
from ..errors import InputResolutionError, RenderSubmitError
from ..models import (
    Artwork,
    CompositionRequest,
    IntegrationLogEntry,
    JobStatus,
    RenderJobHandle,
    Template,
)
from ..stores import IntegrationLog

logger = logging.getLogger(__name__)


class CompositionService:
    """Build composition requests and submit them, logging every dispatch."""

    def __init__(
        self,
        client: RenderClient,
        integration_log: IntegrationLog,
        submit_retries: int = 0,
        submit_backoff: float = 1.0,
    ):
        self.client = client
        self.integration_log = integration_log
        self.submit_retries = submit_retries
        self.submit_backoff = submit_backoff

    def resolve_input(self, artwork: Artwork, template: Template) -> str:
        """
        Base render URL the template composites.

        Raises:
            InputResolutionError: The artwork has no render for the size.
        """
        size = template.size or required_sizes(artwork.template_type.value)[0]
        render = artwork.base_render_for(size)
        if render is None:
            raise InputResolutionError(artwork.id, size)
        return render.file_url

    def build_request(
        self,
        template: Template,
        artwork: Artwork,
        order: int,
        for_marketing: bool,
        artwork_input: str | None = None,
    ) -> CompositionRequest:
        if artwork_input is None:
            artwork_input = self.resolve_input(artwork, template)
        return CompositionRequest(
            artwork_id=artwork.id,
            template_id=template.id,
            artwork_input=artwork_input,
            template_url=template.file_url,
            order=order,
            for_marketing=for_marketing,
        )

    def dispatch(
        self,
        template: Template,
        artwork: Artwork,
        order: int,
        for_marketing: bool,
        run_id: str | None = None,
        artwork_input: str | None = None,
    ) -> RenderJobHandle:
        """
        Resolve, build and submit one template's composition.

        Callers that resolved the input up front (to hand out an order only
        on success) pass it as artwork_input.
        """
        try:
            request = self.build_request(template, artwork, order, for_marketing, artwork_input)
        except InputResolutionError as e:
            self.record_failure(artwork.id, template.id, str(e), run_id)
            raise
        return self.submit(request, run_id)

    def submit(self, request: CompositionRequest, run_id: str | None = None) -> RenderJobHandle:
        """
        Submit with retries and record the outcome in the integration log.

        Raises:
            RenderSubmitError: After the last attempt failed.
        """
        last_error = None
        for attempt in range(self.submit_retries + 1):
            if attempt:
                wait_time = self.submit_backoff * 2 ** (attempt - 1)
                logger.info(f"Retrying template {request.template_id} in {wait_time}s (attempt {attempt + 1})")
                time.sleep(wait_time)
            try:
                handle = self.client.submit_composition(request)
            except RenderSubmitError as e:
                logger.warning(f"Submit failed for template {request.template_id}: {e}")
                last_error = e
                continue

            self.integration_log.record(
                IntegrationLogEntry(
                    action=LOG_ACTION_RENDER_PREVIEWS,
                    artwork_id=request.artwork_id,
                    template_id=request.template_id,
                    job_id=handle.job_id,
                    run_id=run_id,
                )
            )
            return handle

        self.record_failure(request.artwork_id, request.template_id, str(last_error), run_id)
        raise RenderSubmitError(str(last_error))

    def record_failure(
        self, artwork_id: int, template_id: int, error: str, run_id: str | None = None
    ) -> IntegrationLogEntry:
        """Log a template that never reached the rendering service."""
        return self.integration_log.record(
            IntegrationLogEntry(
                action=LOG_ACTION_RENDER_PREVIEWS,
                artwork_id=artwork_id,
                template_id=template_id,
                status=JobStatus.FAILED,
                error=error,
                run_id=run_id,
            )
        )
