"""Integration log - audit trail of composition dispatches."""

import threading
from abc import ABC, abstractmethod

from ..models import IntegrationLogEntry, JobStatus
from .registry import register


class IntegrationLog(ABC):

    @abstractmethod
    def record(self, entry: IntegrationLogEntry) -> IntegrationLogEntry:
        """Append an entry."""

    @abstractmethod
    def find_by_job(self, job_id: str) -> IntegrationLogEntry | None:
        """Latest entry for a job ID, or None."""

    @abstractmethod
    def mark(self, job_id: str, status: JobStatus, error: str | None = None) -> IntegrationLogEntry | None:
        """Update the status of a job's entry. Returns None for unknown jobs."""

    @abstractmethod
    def entries_for(self, artwork_id: int, action: str | None = None) -> list[IntegrationLogEntry]:
        """All entries of an artwork, oldest first."""


@register("integration_log", "memory")
class InMemoryIntegrationLog(IntegrationLog):

    def __init__(self):
        self._entries: list[IntegrationLogEntry] = []
        self._lock = threading.Lock()

    def record(self, entry: IntegrationLogEntry) -> IntegrationLogEntry:
        with self._lock:
            self._entries.append(entry)
        return entry

    def find_by_job(self, job_id: str) -> IntegrationLogEntry | None:
        with self._lock:
            for entry in reversed(self._entries):
                if entry.job_id == job_id:
                    return entry
        return None

    def mark(self, job_id: str, status: JobStatus, error: str | None = None) -> IntegrationLogEntry | None:
        entry = self.find_by_job(job_id)
        if entry is None:
            return None
        with self._lock:
            entry.status = status
            entry.error = error
        return entry

    def entries_for(self, artwork_id: int, action: str | None = None) -> list[IntegrationLogEntry]:
        with self._lock:
            return [
                entry for entry in self._entries
                if entry.artwork_id == artwork_id and (action is None or entry.action == action)
            ]
