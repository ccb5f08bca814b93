"""Persistence collaborators."""

from .artworks import ArtworkRepository, InMemoryArtworkRepository
from .integration_log import IntegrationLog, InMemoryIntegrationLog
from .registry import get_backend_class, list_backends, register


def get_repository_class(name: str) -> type[ArtworkRepository]:
    """Artwork repository class for a config name."""
    return get_backend_class("repository", name)


def get_integration_log_class(name: str) -> type[IntegrationLog]:
    """Integration log class for a config name."""
    return get_backend_class("integration_log", name)


__all__ = [
    "ArtworkRepository",
    "InMemoryArtworkRepository",
    "IntegrationLog",
    "InMemoryIntegrationLog",
    "register",
    "get_repository_class",
    "get_integration_log_class",
    "list_backends",
]
