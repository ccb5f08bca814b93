"""
Artwork persistence.

ArtworkRepository is the seam to the app's record store. The pipeline only
needs to read artworks and their templates, and to create/destroy previews.
InMemoryArtworkRepository backs local runs and tests.
"""

import itertools
import threading
from abc import ABC, abstractmethod
from typing import Any

from ..models import Artwork, Preview, Template
from .registry import register


class ArtworkRepository(ABC):

    @abstractmethod
    def get_artwork(self, artwork_id: int) -> Artwork | None:
        """Return artwork by ID, or None if not found."""

    @abstractmethod
    def load_templates(self, artwork_id: int) -> list[Template]:
        """Read the artwork's templates fresh from storage, in arrival order."""

    @abstractmethod
    def destroy_previews(self, artwork_id: int) -> None:
        """Delete every preview of the artwork."""

    @abstractmethod
    def create_preview(
        self,
        artwork_id: int,
        image_url: str,
        order: int | None,
        for_marketing: bool = False,
        params: dict[str, Any] | None = None,
    ) -> Preview:
        """Create a preview record."""

    @abstractmethod
    def list_previews(self, artwork_id: int) -> list[Preview]:
        """All previews of the artwork, in creation order."""


@register("repository", "memory")
class InMemoryArtworkRepository(ArtworkRepository):
    """Thread-safe dict-backed repository."""

    def __init__(self):
        self._artworks: dict[int, Artwork] = {}
        self._templates: dict[int, list[Template]] = {}
        self._previews: dict[int, list[Preview]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add_artwork(self, artwork: Artwork, templates: list[Template] | None = None) -> None:
        with self._lock:
            self._artworks[artwork.id] = artwork
            self._templates[artwork.id] = list(templates or [])
            self._previews.setdefault(artwork.id, [])

    def assign_templates(self, artwork_id: int, templates: list[Template]) -> None:
        with self._lock:
            self._templates[artwork_id] = list(templates)

    def get_artwork(self, artwork_id: int) -> Artwork | None:
        with self._lock:
            return self._artworks.get(artwork_id)

    def load_templates(self, artwork_id: int) -> list[Template]:
        with self._lock:
            return list(self._templates.get(artwork_id, []))

    def destroy_previews(self, artwork_id: int) -> None:
        with self._lock:
            self._previews[artwork_id] = []

    def create_preview(
        self,
        artwork_id: int,
        image_url: str,
        order: int | None,
        for_marketing: bool = False,
        params: dict[str, Any] | None = None,
    ) -> Preview:
        with self._lock:
            preview = Preview(
                id=next(self._ids),
                artwork_id=artwork_id,
                order=order,
                image_url=image_url,
                for_marketing=for_marketing,
                params=dict(params or {}),
            )
            self._previews.setdefault(artwork_id, []).append(preview)
            return preview

    def list_previews(self, artwork_id: int) -> list[Preview]:
        with self._lock:
            return list(self._previews.get(artwork_id, []))
