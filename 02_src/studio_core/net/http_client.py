"""Network client implementation using httpx."""

from typing import Any, Protocol

import httpx

from ..errors import NetworkError
from ..logging_config import get_logger
from ..models import NetworkResponse

logger = get_logger(__name__)


class INetworkClient(Protocol):
    """Fetch-like abstraction over HTTP."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> NetworkResponse:
        """Perform a request. Raise NetworkError if it never completes."""
        ...


class HttpNetworkClient:
    """INetworkClient on a shared httpx.AsyncClient."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._client = client or httpx.AsyncClient()
        self._timeout = timeout

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> NetworkResponse:
        try:
            response = await self._client.request(
                method,
                url,
                json=json,
                data=data,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except httpx.HTTPError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e

        try:
            body = response.json()
        except ValueError:
            logger.debug("Non-JSON response from %s (status %s)", url, response.status_code)
            body = None

        return NetworkResponse(
            status_code=response.status_code,
            data=body if isinstance(body, dict) else None,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
