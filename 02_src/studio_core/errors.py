"""Exception hierarchy for the studio site core."""


class StudioCoreError(Exception):
    """Base class for all core errors."""


class NetworkError(StudioCoreError):
    """The request never completed (connection, timeout, protocol failure)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class RemoteUnavailableError(StudioCoreError):
    """Remote endpoint unreachable or answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DialogueBusyError(StudioCoreError):
    """A user message was submitted while a response is still pending."""


class SubmissionInProgressError(StudioCoreError):
    """The form was submitted again before the previous attempt finished."""
