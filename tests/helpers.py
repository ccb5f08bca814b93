"""Test helpers: a fake rendering service and model builders."""

import itertools

from mockups.errors import RenderSubmitError
from mockups.models import (
    Artwork,
    BaseRender,
    CompositionRequest,
    JobStatus,
    RenderJobHandle,
    Template,
    TemplateType,
)


class FakeRenderClient:
    """Records submissions; template ids in fail_templates are rejected."""

    def __init__(self, fail_templates: set[int] | None = None):
        self.fail_templates = fail_templates or set()
        self.submitted: list[CompositionRequest] = []
        self.statuses: dict[str, JobStatus] = {}
        self.poll_calls: list[str] = []
        self._ids = itertools.count(1)

    def submit_composition(self, request: CompositionRequest) -> RenderJobHandle:
        self.submitted.append(request)
        if request.template_id in self.fail_templates:
            raise RenderSubmitError(f"service unavailable for template {request.template_id}")
        job_id = f"job-{next(self._ids)}"
        return RenderJobHandle(job_id=job_id, status_url=f"https://render.test/status/{job_id}")

    def poll(self, job_id: str) -> tuple[JobStatus, str | None]:
        self.poll_calls.append(job_id)
        return self.statuses.get(job_id, JobStatus.PENDING), None


def make_artwork(artwork_id: int = 1, template_type: TemplateType = TemplateType.VERTICAL, sizes=None) -> Artwork:
    sizes = ["24x36", "16x24"] if sizes is None else sizes
    return Artwork(
        id=artwork_id,
        template_type=template_type,
        base_renders=[BaseRender(size, f"https://cdn.test/art/{artwork_id}/{size}.jpg") for size in sizes],
    )


def make_template(template_id: int, **flags) -> Template:
    return Template(id=template_id, file_url=f"https://cdn.test/templates/{template_id}.psd", **flags)
