"""Integration log entry - one per composition dispatch."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .job import JobStatus


@dataclass
class IntegrationLogEntry:
    action: str
    artwork_id: int
    template_id: int | None     # None on run-start markers
    job_id: str | None = None    # None when submission failed
    status: JobStatus = JobStatus.PENDING
    error: str | None = None
    run_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
