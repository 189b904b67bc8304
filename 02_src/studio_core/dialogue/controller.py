"""DialogueController implementation."""

import asyncio
from typing import Protocol

from ..errors import DialogueBusyError, RemoteUnavailableError
from ..knowledge import SITE_CONTEXT, IKnowledgeResolver
from ..llm import ICompletionClient
from ..logging_config import get_logger
from ..models import ConversationMessage, DialogueSession, Role

GREETING_MESSAGE = "Здравствуйте! Я виртуальный помощник ARCHITECT. Чем могу помочь?"
EMPTY_REPLY_MESSAGE = (
    "Извините, я не смог обработать ваш запрос. Попробуйте переформулировать вопрос "
    "или свяжитесь с нами по телефону."
)
FALLBACK_MESSAGE = (
    "К сожалению, я не нашел ответа на ваш вопрос. Рекомендую посмотреть раздел FAQ "
    "или оставить заявку — наш архитектор свяжется с вами лично."
)


class IDialogueController(Protocol):
    """Drives one chat widget conversation."""

    @property
    def awaiting_response(self) -> bool:
        """True while a reply is being prepared."""
        ...

    def history(self) -> list[ConversationMessage]:
        """Messages in display order."""
        ...

    async def submit_user_message(self, text: str) -> ConversationMessage | None:
        """Append the user's message and exactly one assistant reply. Return the reply."""
        ...

    def reset(self) -> None:
        """Discard the conversation."""
        ...


class DialogueController:
    """Answers from the knowledge base first, then from the remote assistant.

    Only one exchange may be in flight: a second message sent while a reply is
    pending raises DialogueBusyError and leaves the session untouched. Remote
    failures never reach the caller; they become a fallback reply.
    """

    def __init__(
        self,
        session: DialogueSession,
        resolver: IKnowledgeResolver,
        completion_client: ICompletionClient,
        context: str = SITE_CONTEXT,
        reply_delay: float = 0.0,
        session_id: str | None = None,
    ):
        self._session = session
        self._log = get_logger(__name__, session_id=session_id)
        self._resolver = resolver
        self._completion = completion_client
        self._context = context
        self._reply_delay = reply_delay

    @property
    def session(self) -> DialogueSession:
        return self._session

    @property
    def awaiting_response(self) -> bool:
        return self._session.awaiting_response

    def history(self) -> list[ConversationMessage]:
        return self._session.history()

    async def submit_user_message(self, text: str) -> ConversationMessage | None:
        """Handle a message typed by the visitor.

        Blank input is ignored and returns None. Returns None as well when the
        conversation was reset before the reply arrived.
        """
        text = text.strip()
        if not text:
            return None

        session = self._session
        if session.awaiting_response:
            self._log.warning("Message rejected: previous reply still pending")
            raise DialogueBusyError("A reply to the previous message is still pending")

        generation = session.generation
        session.append(ConversationMessage(Role.USER, text))
        session.awaiting_response = True
        self._log.info("User message received: %s", text[:100])

        try:
            reply_text = await self._compose_reply(text)
        except asyncio.CancelledError:
            # The exchange still gets its one assistant message
            if session.generation == generation:
                self._log.warning("Reply cancelled, closing exchange with fallback")
                session.append(ConversationMessage(Role.ASSISTANT, FALLBACK_MESSAGE))
            raise
        finally:
            if session.generation == generation:
                session.awaiting_response = False

        if session.generation != generation:
            self._log.info("Conversation was reset, dropping stale reply")
            return None

        reply = ConversationMessage(Role.ASSISTANT, reply_text)
        session.append(reply)
        return reply

    def reset(self) -> None:
        self._log.info("Conversation reset")
        self._session.reset()

    async def _compose_reply(self, text: str) -> str:
        answer = self._resolver.resolve(text)
        if answer is not None:
            self._log.debug("Answered from knowledge base")
            if self._reply_delay > 0:
                await asyncio.sleep(self._reply_delay)
            return answer

        try:
            reply = await self._completion.complete(text, self._context)
        except RemoteUnavailableError as e:
            self._log.warning("Remote assistant unavailable: %s", e)
            return FALLBACK_MESSAGE
        except Exception as e:
            self._log.error("Remote assistant error: %s", e, exc_info=True)
            return FALLBACK_MESSAGE

        if not reply:
            return EMPTY_REPLY_MESSAGE
        return reply
