"""Pipeline run summary."""

from dataclasses import dataclass, field

from .job import RenderJobHandle
from .preview import Preview
from .template import TemplateCategory


@dataclass(frozen=True)
class DispatchedJob:
    template_id: int
    category: TemplateCategory
    order: int
    handle: RenderJobHandle


@dataclass(frozen=True)
class TemplateFailure:
    template_id: int
    category: TemplateCategory
    error: str
    order: int | None = None    # None when the failure happened before an order was assigned


@dataclass
class RenderRun:
    """What one pipeline run dispatched, in dispatch order."""
    run_id: str
    artwork_id: int
    jobs: list[DispatchedJob] = field(default_factory=list)
    failures: list[TemplateFailure] = field(default_factory=list)
    synthesized: list[Preview] = field(default_factory=list)

    @property
    def handles(self) -> list[RenderJobHandle]:
        return [job.handle for job in self.jobs]
