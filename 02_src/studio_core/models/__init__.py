"""Core data models for the studio site."""

from .dialogue import ConversationMessage, DialogueSession, Role
from .knowledge import KnowledgeEntry
from .network import NetworkResponse
from .submission import SubmissionState, SubmissionStatus

__all__ = [
    # Knowledge
    "KnowledgeEntry",
    # Dialogue
    "Role",
    "ConversationMessage",
    "DialogueSession",
    # Submission
    "SubmissionStatus",
    "SubmissionState",
    # Network
    "NetworkResponse",
]
