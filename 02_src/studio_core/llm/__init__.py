"""LLM module."""

from .completion import ICompletionClient, RemoteCompletionClient
from .llm_provider import ILLMProvider, LLMProvider

__all__ = ["ICompletionClient", "RemoteCompletionClient", "ILLMProvider", "LLMProvider"]
