"""Mockup template model."""

from dataclasses import dataclass
from enum import Enum


class TemplateCategory(Enum):
    """Render batch a template belongs to, in dispatch order."""
    STANDARD = "standard"
    MOCKUP = "mockup"
    MODEL_MOCKUP = "model_mockup"
    MARKETING = "marketing"


@dataclass(frozen=True)
class Template:
    """A product mockup image the artwork is composited onto."""

    id: int
    file_url: str
    with_model: bool = False
    is_standard: bool = False
    for_marketing: bool = False
    order: int | None = None     # sort key, standard batch only
    size: str | None = None      # base render size override

    @property
    def category(self) -> TemplateCategory:
        # Marketing wins over every other flag
        if self.for_marketing:
            return TemplateCategory.MARKETING
        if self.with_model:
            return TemplateCategory.MODEL_MOCKUP
        if self.is_standard:
            return TemplateCategory.STANDARD
        return TemplateCategory.MOCKUP
