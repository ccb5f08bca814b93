"""Render job status polling."""

from ..clients.render import RenderClient
from ..models import JobStatus, JobStatusReport, RenderJobHandle


class StatusPoller:
    """Pull-based job status queries. No local state, safe to repeat."""

    def __init__(self, client: RenderClient):
        self.client = client

    def check(self, handle: RenderJobHandle) -> JobStatus:
        status, _ = self.client.poll(handle.job_id)
        return status

    def check_all(self, handles: list[RenderJobHandle]) -> list[JobStatusReport]:
        return [JobStatusReport(handle=handle, status=self.check(handle)) for handle in handles]
