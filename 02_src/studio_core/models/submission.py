"""Contact form submission data models."""

from dataclasses import dataclass
from enum import Enum


class SubmissionStatus(str, Enum):
    """Lifecycle of a single form submission."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    """Observable state of a form; ``message`` is set only when failed."""

    status: SubmissionStatus = SubmissionStatus.IDLE
    message: str | None = None

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING

    @property
    def is_success(self) -> bool:
        return self.status is SubmissionStatus.SUCCEEDED

    @property
    def is_error(self) -> bool:
        return self.status is SubmissionStatus.FAILED


IDLE = SubmissionState()
SUBMITTING = SubmissionState(SubmissionStatus.SUBMITTING)
SUCCEEDED = SubmissionState(SubmissionStatus.SUCCEEDED)


def failed(message: str) -> SubmissionState:
    """Failed state carrying a human-readable message."""
    return SubmissionState(SubmissionStatus.FAILED, message)
