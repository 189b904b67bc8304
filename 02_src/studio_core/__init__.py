"""Core module."""

from .app import Application, IApplication, VisitorSession
from .config import Settings
from .dialogue import DialogueController, IDialogueController
from .errors import (
    DialogueBusyError,
    NetworkError,
    RemoteUnavailableError,
    StudioCoreError,
    SubmissionInProgressError,
)
from .forms import ISubmissionController, SubmissionController
from .knowledge import IKnowledgeResolver, KnowledgeResolver, resolve
from .llm import ICompletionClient, ILLMProvider, LLMProvider, RemoteCompletionClient
from .models import (
    ConversationMessage,
    DialogueSession,
    KnowledgeEntry,
    NetworkResponse,
    Role,
    SubmissionState,
    SubmissionStatus,
)
from .net import HttpNetworkClient, INetworkClient

__all__ = [
    # Application
    "Application",
    "IApplication",
    "VisitorSession",
    "Settings",
    # Models
    "KnowledgeEntry",
    "Role",
    "ConversationMessage",
    "DialogueSession",
    "SubmissionStatus",
    "SubmissionState",
    "NetworkResponse",
    # Errors
    "StudioCoreError",
    "NetworkError",
    "RemoteUnavailableError",
    "DialogueBusyError",
    "SubmissionInProgressError",
    # Components
    "IKnowledgeResolver",
    "KnowledgeResolver",
    "resolve",
    "INetworkClient",
    "HttpNetworkClient",
    "ICompletionClient",
    "RemoteCompletionClient",
    "ILLMProvider",
    "LLMProvider",
    "IDialogueController",
    "DialogueController",
    "ISubmissionController",
    "SubmissionController",
]
