"""Background job bookkeeping and API errors for the web service."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Union


class ApiError(Exception):
    """An error carrying the HTTP status it should be reported with."""

    def __init__(self, status: HTTPStatus, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    @classmethod
    def bad_request(cls, message: str) -> ApiError:
        return cls(HTTPStatus.BAD_REQUEST, message)

    @classmethod
    def not_found(cls, message: str) -> ApiError:
        return cls(HTTPStatus.NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> ApiError:
        return cls(HTTPStatus.INTERNAL_SERVER_ERROR, message)

    def to_json(self) -> dict[str, str]:
        """The response body for this error."""
        return {"error": self.message}


@dataclass(frozen=True)
class Running:
    """A job in progress; ``pct`` is 0-100, or negative when indeterminate."""

    progress: str
    pct: float
    current_step: int
    total_steps: int


@dataclass(frozen=True)
class Completed:
    result: Any


@dataclass(frozen=True)
class Failed:
    error: str


JobStatus = Union[Running, Completed, Failed]


class JobStore:
    """Thread-safe map from job id to its latest status."""

    def __init__(self) -> None:
        self._jobs: dict[str, JobStatus] = {}
        self._lock = threading.Lock()

    def create(self, status: JobStatus) -> str:
        """Register a new job and return its id."""
        job_id = str(uuid.uuid4())
        with self._lock:
            self._jobs[job_id] = status
        return job_id

    def update(self, job_id: str, status: JobStatus) -> None:
        with self._lock:
            self._jobs[job_id] = status

    def get(self, job_id: str) -> JobStatus | None:
        with self._lock:
            return self._jobs.get(job_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def status_response(self, job_id: str) -> dict[str, Any]:
        """The status body for ``job_id``; raises :class:`ApiError` if unknown."""
        status = self.get(job_id)
        if isinstance(status, Running):
            return {
                "job_id": job_id,
                "status": "running",
                "progress": status.progress,
                "progress_pct": status.pct,
                "current_step": status.current_step,
                "total_steps": status.total_steps,
            }
        if isinstance(status, Completed):
            return {"job_id": job_id, "status": "completed", "result": status.result}
        if isinstance(status, Failed):
            return {"job_id": job_id, "status": "failed", "error": status.error}
        raise ApiError.not_found("Job not found")