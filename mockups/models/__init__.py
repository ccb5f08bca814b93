"""Data models."""

from .artwork import Artwork, BaseRender, TemplateType
from .integration_log import IntegrationLogEntry
from .job import CompositionRequest, JobStatus, JobStatusReport, RenderJobHandle
from .preview import Preview
from .run import DispatchedJob, RenderRun, TemplateFailure
from .template import Template, TemplateCategory

__all__ = [
    "Artwork",
    "BaseRender",
    "TemplateType",
    "IntegrationLogEntry",
    "CompositionRequest",
    "JobStatus",
    "JobStatusReport",
    "RenderJobHandle",
    "Preview",
    "DispatchedJob",
    "RenderRun",
    "TemplateFailure",
    "Template",
    "TemplateCategory",
]
