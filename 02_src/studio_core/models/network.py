"""Network exchange data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkResponse:
    """A completed HTTP exchange.

    ``data`` is the parsed JSON body when it is an object, otherwise None.
    """

    status_code: int
    data: dict | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
