"""Pipeline wiring from config."""

import logging
from functools import lru_cache

from ..clients import RenderClient
from ..config import (
    ARTWORK_REPOSITORY_BACKEND,
    DISPATCH_WORKERS,
    INTEGRATION_LOG_BACKEND,
    RENDER_API_KEY,
    RENDER_API_TOKEN,
    RENDER_API_URL,
    RENDER_SMART_OBJECT_LAYER,
    SUBMIT_BACKOFF,
    SUBMIT_RETRIES,
    UPLOAD_CALLBACK_URL,
)
from ..services import CompositionService, StatusPoller
from ..stores import (
    ArtworkRepository,
    InMemoryArtworkRepository,
    InMemoryIntegrationLog,
    IntegrationLog,
    get_integration_log_class,
    get_repository_class,
)
from .engine import PreviewPipeline

logger = logging.getLogger(__name__)


def build_pipeline(
    repository: ArtworkRepository | None = None,
    integration_log: IntegrationLog | None = None,
    client: RenderClient | None = None,
    repository_backend: str = ARTWORK_REPOSITORY_BACKEND,
    integration_log_backend: str = INTEGRATION_LOG_BACKEND,
) -> PreviewPipeline:
    """
    Build a pipeline, defaulting every collaborator from config.

    Stores not passed in are created from their configured backend. The
    "memory" backends hold nothing across processes, so a deployment must
    point both at persistent stores.

    Raises:
        ValueError: A configured backend is unknown or cannot be imported.
    """
    if repository is None:
        repository = get_repository_class(repository_backend)()
    if integration_log is None:
        integration_log = get_integration_log_class(integration_log_backend)()

    if isinstance(repository, InMemoryArtworkRepository) or isinstance(integration_log, InMemoryIntegrationLog):
        logger.warning("Using in-memory stores; artworks and job history are not shared between processes")

    client = client or RenderClient(
        api_token=RENDER_API_TOKEN,
        api_key=RENDER_API_KEY,
        base_url=RENDER_API_URL,
        callback_url=UPLOAD_CALLBACK_URL,
        smart_object_layer=RENDER_SMART_OBJECT_LAYER,
    )
    composition = CompositionService(
        client,
        integration_log,
        submit_retries=SUBMIT_RETRIES,
        submit_backoff=SUBMIT_BACKOFF,
    )
    return PreviewPipeline(
        repository=repository,
        integration_log=integration_log,
        composition=composition,
        status_poller=StatusPoller(client),
        dispatch_workers=DISPATCH_WORKERS,
    )


@lru_cache(maxsize=1)
def get_pipeline() -> PreviewPipeline:
    """Process-wide pipeline shared by the handlers."""
    return build_pipeline()
