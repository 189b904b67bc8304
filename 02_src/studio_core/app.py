"""Application bootstrap and lifecycle management."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Protocol

from .config import Settings
from .dialogue import GREETING_MESSAGE, DialogueController
from .forms import SubmissionController
from .knowledge import KnowledgeResolver
from .llm import ILLMProvider, LLMProvider, RemoteCompletionClient
from .logging_config import get_logger
from .models import ConversationMessage, DialogueSession, Role
from .net import HttpNetworkClient, INetworkClient

logger = get_logger(__name__)


@dataclass
class VisitorSession:
    """Controllers owned by one site visitor."""

    dialogue: DialogueController
    contact_form: SubmissionController


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Drop all visitor sessions."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        network: INetworkClient | None = None,
        llm_provider: ILLMProvider | None = None,
    ):
        self._settings = settings or Settings.from_env()

        # Injected components are kept, the rest are created in start()
        self._network: INetworkClient | None = network
        self._owns_network = network is None
        self._llm: ILLMProvider | None = llm_provider
        self._resolver: KnowledgeResolver | None = None
        self._completion: RemoteCompletionClient | None = None
        # Least recently used first, capped at settings.max_sessions
        self._sessions: OrderedDict[str, VisitorSession] = OrderedDict()
        self._running = False

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Network client (no dependencies)
        if self._network is None:
            self._network = HttpNetworkClient(timeout=self._settings.http_timeout)
        logger.info("Network client initialized")

        # 2. Knowledge resolver (static table)
        self._resolver = KnowledgeResolver()

        # 3. Remote completion client (depends on network)
        self._completion = RemoteCompletionClient(
            self._network,
            self._settings.chat_api_url,
            timeout=self._settings.http_timeout,
        )

        # 4. LLMProvider backs /api/chat, optional without an API key
        if self._llm is None and self._settings.anthropic_api_key:
            self._llm = LLMProvider(
                api_key=self._settings.anthropic_api_key,
                model=self._settings.anthropic_model,
            )
        if self._llm is None:
            logger.warning("No LLM provider configured, /api/chat is disabled")
        else:
            logger.info("LLM provider initialized")

        self._running = True
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._running = False
        self._sessions.clear()
        if self._owns_network and isinstance(self._network, HttpNetworkClient):
            await self._network.aclose()
            self._network = None
            logger.info("Network client closed")

    async def reset(self) -> None:
        """Drop all visitor sessions."""
        self._sessions.clear()
        logger.info("Reset complete")

    def session(self, session_id: str) -> VisitorSession:
        """Get or create the controllers of a visitor.

        The least recently used session is evicted once the map exceeds
        settings.max_sessions.
        """
        if not self._running:
            raise RuntimeError("Application not started")

        if session_id in self._sessions:
            self._sessions.move_to_end(session_id)
        else:
            self._sessions[session_id] = VisitorSession(
                dialogue=DialogueController(
                    session=DialogueSession(greeting=GREETING_MESSAGE),
                    resolver=self._resolver,
                    completion_client=self._completion,
                    reply_delay=self._settings.reply_delay,
                    session_id=session_id,
                ),
                contact_form=SubmissionController(
                    network=self._network,
                    intake_url=self._settings.intake_url,
                    access_key=self._settings.access_key,
                    timeout=self._settings.http_timeout,
                    session_id=session_id,
                ),
            )
            logger.debug("Created session %s", session_id)
            self._evict()
        return self._sessions[session_id]

    def find_session(self, session_id: str) -> VisitorSession | None:
        """Existing controllers of a visitor, without creating them."""
        if not self._running:
            raise RuntimeError("Application not started")

        visitor = self._sessions.get(session_id)
        if visitor is not None:
            self._sessions.move_to_end(session_id)
        return visitor

    def drop_session(self, session_id: str) -> bool:
        """Forget a visitor. Return True if a session existed."""
        visitor = self._sessions.pop(session_id, None)
        if visitor is None:
            return False

        # Any reply still in flight belongs to a discarded conversation
        visitor.dialogue.reset()
        logger.debug("Dropped session %s", session_id)
        return True

    @staticmethod
    def initial_history() -> list[ConversationMessage]:
        """History of a conversation nobody has written to yet."""
        return [ConversationMessage(Role.ASSISTANT, GREETING_MESSAGE)]

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    def _evict(self) -> None:
        while len(self._sessions) > self._settings.max_sessions:
            session_id, visitor = self._sessions.popitem(last=False)
            visitor.dialogue.reset()
            logger.info("Evicted idle session %s", session_id)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def resolver(self) -> KnowledgeResolver:
        """Get knowledge resolver instance."""
        if not self._resolver:
            raise RuntimeError("Application not started")
        return self._resolver

    @property
    def llm(self) -> ILLMProvider | None:
        """LLM provider, None when not configured."""
        return self._llm
