"""Artwork model."""

from dataclasses import dataclass, field
from enum import Enum


class TemplateType(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    TALL = "tall"
    SQUARE = "square"
    WIDE = "wide"


@dataclass(frozen=True)
class BaseRender:
    """Uploaded source image for one physical print size."""
    size: str       # e.g. "24x36"
    file_url: str


@dataclass
class Artwork:
    """An artwork whose previews get composited onto templates."""

    id: int
    template_type: TemplateType
    base_renders: list[BaseRender] = field(default_factory=list)

    def base_render_for(self, size: str) -> BaseRender | None:
        """Find the base render uploaded for a size."""
        for render in self.base_renders:
            if render.size == size:
                return render
        return None
