"""Dialogue module."""

from .controller import (
    EMPTY_REPLY_MESSAGE,
    FALLBACK_MESSAGE,
    GREETING_MESSAGE,
    DialogueController,
    IDialogueController,
)

__all__ = [
    "DialogueController",
    "IDialogueController",
    "GREETING_MESSAGE",
    "EMPTY_REPLY_MESSAGE",
    "FALLBACK_MESSAGE",
]
