"""Dialogue-related data models."""

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationMessage:
    """A single message in the chat widget."""

    role: Role
    text: str


@dataclass
class DialogueSession:
    """Owned conversation state for one chat widget.

    Messages are append-only; ``generation`` changes on every reset so that
    responses computed for a discarded conversation can be recognised.
    """

    greeting: str | None = None
    messages: list[ConversationMessage] = field(default_factory=list)
    awaiting_response: bool = False
    generation: int = 0

    def __post_init__(self) -> None:
        if self.greeting and not self.messages:
            self.messages.append(ConversationMessage(Role.ASSISTANT, self.greeting))

    def append(self, message: ConversationMessage) -> None:
        """Add a message at the end of the history."""
        self.messages.append(message)

    def history(self) -> list[ConversationMessage]:
        """Copy of the history in display order."""
        return self.messages.copy()

    def reset(self) -> None:
        """Discard the conversation and start a new generation."""
        self.messages.clear()
        if self.greeting:
            self.messages.append(ConversationMessage(Role.ASSISTANT, self.greeting))
        self.awaiting_response = False
        self.generation += 1
