"""Render job models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..config import COMPOSITION_WIDTH, UPLOAD_TYPE_PREVIEW


class JobStatus(Enum):
    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class RenderJobHandle:
    """Identifier of an in-flight composition on the rendering service."""
    job_id: str
    status_url: str | None = None


@dataclass(frozen=True)
class JobStatusReport:
    handle: RenderJobHandle
    status: JobStatus


@dataclass(frozen=True)
class CompositionRequest:
    """One artwork-onto-template composition, built per dispatch."""

    artwork_id: int
    template_id: int
    artwork_input: str       # base render URL
    template_url: str
    order: int
    for_marketing: bool = False
    width: int = COMPOSITION_WIDTH
    upload_type: str = UPLOAD_TYPE_PREVIEW
    attachable_type: str = "Artwork"

    def metadata(self) -> dict[str, Any]:
        """Params the upload callback needs to create the preview."""
        return {
            "attachable_type": self.attachable_type,
            "attachable_id": self.artwork_id,
            "template_id": self.template_id,
            "upload_type": self.upload_type,
            "order": self.order,
            "for_marketing": "true" if self.for_marketing else "false",
        }
