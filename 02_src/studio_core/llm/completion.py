"""Client for the remote chat completion endpoint."""

from typing import Protocol

from ..errors import NetworkError, RemoteUnavailableError
from ..logging_config import get_logger
from ..net import INetworkClient

logger = get_logger(__name__)


class ICompletionClient(Protocol):
    """Answers questions the knowledge base could not."""

    async def complete(self, message: str, context: str) -> str:
        """Return the reply text, "" if the endpoint gave none.

        Raises RemoteUnavailableError on transport failure, non-2xx status or a
        body that is not a JSON object.
        """
        ...


class RemoteCompletionClient:
    """POSTs {message, context} to the chat endpoint and reads {reply}."""

    def __init__(self, network: INetworkClient, url: str, timeout: float | None = None):
        self._network = network
        self._url = url
        self._timeout = timeout

    async def complete(self, message: str, context: str) -> str:
        try:
            response = await self._network.request(
                "POST",
                self._url,
                json={"message": message, "context": context},
                timeout=self._timeout,
            )
        except NetworkError as e:
            raise RemoteUnavailableError(str(e)) from e

        if not response.ok:
            raise RemoteUnavailableError(
                f"Chat endpoint answered {response.status_code}",
                status_code=response.status_code,
            )

        if response.data is None:
            # Unreadable body is treated like a failed request
            raise RemoteUnavailableError(
                "Chat endpoint sent a body that is not a JSON object",
                status_code=response.status_code,
            )

        reply = response.data.get("reply")
        if not isinstance(reply, str):
            logger.warning("Chat endpoint returned no reply field")
            return ""
        return reply.strip()
