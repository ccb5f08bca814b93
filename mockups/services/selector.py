"""Template selection - split an artwork's templates into render batches."""

from dataclasses import dataclass, field

from ..models import Template, TemplateCategory
from ..stores import ArtworkRepository


@dataclass
class TemplateBatches:
    """The four render batches, each already in dispatch order."""
    standard: list[Template] = field(default_factory=list)
    mockup: list[Template] = field(default_factory=list)
    model_mockup: list[Template] = field(default_factory=list)
    marketing: list[Template] = field(default_factory=list)

    def in_dispatch_order(self) -> list[tuple[TemplateCategory, list[Template]]]:
        return [
            (TemplateCategory.STANDARD, self.standard),
            (TemplateCategory.MOCKUP, self.mockup),
            (TemplateCategory.MODEL_MOCKUP, self.model_mockup),
            (TemplateCategory.MARKETING, self.marketing),
        ]

    def __len__(self) -> int:
        return sum(len(batch) for _, batch in self.in_dispatch_order())


def partition(templates: list[Template]) -> TemplateBatches:
    """
    Classify each template once and group by category.

    Standard templates sort by their order key (unordered ones last); the
    other batches keep arrival order.
    """
    batches = TemplateBatches()
    by_category = {
        TemplateCategory.STANDARD: batches.standard,
        TemplateCategory.MOCKUP: batches.mockup,
        TemplateCategory.MODEL_MOCKUP: batches.model_mockup,
        TemplateCategory.MARKETING: batches.marketing,
    }
    for template in templates:
        by_category[template.category].append(template)

    batches.standard.sort(key=lambda t: (t.order is None, t.order or 0))
    return batches


class TemplateSelector:
    """Reload an artwork's templates and partition them."""

    def __init__(self, repository: ArtworkRepository):
        self.repository = repository

    def select(self, artwork_id: int) -> TemplateBatches:
        # Always read fresh: admins can reassign templates between runs
        return partition(self.repository.load_templates(artwork_id))
