"""Network module."""

from .http_client import HttpNetworkClient, INetworkClient

__all__ = ["HttpNetworkClient", "INetworkClient"]
