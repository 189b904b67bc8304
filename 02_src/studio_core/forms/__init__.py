"""Forms module."""

from .submission import (
    ACCESS_KEY_FIELD,
    DEFAULT_ERROR_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    ISubmissionController,
    SubmissionController,
)

__all__ = [
    "ISubmissionController",
    "SubmissionController",
    "ACCESS_KEY_FIELD",
    "DEFAULT_ERROR_MESSAGE",
    "NETWORK_ERROR_MESSAGE",
]
