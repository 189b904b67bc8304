"""Tests for LLMProvider."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from studio_core.llm import LLMProvider


def _response(*texts):
    response = Mock()
    response.content = [Mock(type="text", text=t) for t in texts]
    return response


class TestLLMProviderInit:
    """Tests for LLMProvider initialization."""

    def test_init_with_api_key(self, monkeypatch):
        """Test initialization with API key."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        with patch("studio_core.llm.llm_provider.anthropic.AsyncAnthropic"):
            provider = LLMProvider()
            assert provider is not None

    def test_init_without_api_key(self, monkeypatch):
        """Test initialization without API key raises error."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

        with patch("studio_core.llm.llm_provider.anthropic.AsyncAnthropic"):
            with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
                LLMProvider()


class TestLLMProviderComplete:
    """Tests for LLMProvider.complete() method."""

    @pytest.mark.asyncio
    async def test_complete_returns_response(self):
        """Test that complete() returns LLM response."""
        mock_client = Mock()
        mock_client.messages.create = AsyncMock(return_value=_response("Test response"))

        with patch(
            "studio_core.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider(api_key="test_key")
            response = await provider.complete(
                messages=[{"role": "user", "content": "Hello"}]
            )

        assert response == "Test response"

    @pytest.mark.asyncio
    async def test_complete_sends_context_as_system(self):
        """Test that complete() sends the site context as system prompt."""
        mock_client = Mock()
        mock_client.messages.create = AsyncMock(return_value=_response("Ответ"))

        with patch(
            "studio_core.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider(api_key="test_key", model="test-model")
            await provider.complete(
                messages=[{"role": "user", "content": "Погода?"}],
                system="ARCHITECT — студия",
                max_tokens=2048,
            )

        call_args = mock_client.messages.create.call_args
        assert call_args.kwargs["model"] == "test-model"
        assert call_args.kwargs["max_tokens"] == 2048
        assert call_args.kwargs["system"] == "ARCHITECT — студия"
        assert call_args.kwargs["messages"] == [{"role": "user", "content": "Погода?"}]

    @pytest.mark.asyncio
    async def test_complete_without_system(self):
        """Test that no system prompt is sent when absent."""
        mock_client = Mock()
        mock_client.messages.create = AsyncMock(return_value=_response("Hi"))

        with patch(
            "studio_core.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider(api_key="test_key")
            await provider.complete(messages=[{"role": "user", "content": "Hi"}])

        call_args = mock_client.messages.create.call_args
        assert "system" not in call_args.kwargs
        assert call_args.kwargs["max_tokens"] == 1024  # default

    @pytest.mark.asyncio
    async def test_complete_joins_text_blocks(self):
        """Test that text blocks are concatenated."""
        mock_client = Mock()
        mock_client.messages.create = AsyncMock(return_value=_response("Часть 1. ", "Часть 2."))

        with patch(
            "studio_core.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider(api_key="test_key")
            response = await provider.complete(messages=[{"role": "user", "content": "x"}])

        assert response == "Часть 1. Часть 2."

    @pytest.mark.asyncio
    async def test_complete_wraps_errors(self):
        """Test that API errors are wrapped in RuntimeError."""
        mock_client = Mock()
        mock_client.messages.create = AsyncMock(side_effect=Exception("API Error"))

        with patch(
            "studio_core.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider(api_key="test_key")

            with pytest.raises(RuntimeError, match="API Error"):
                await provider.complete(messages=[{"role": "user", "content": "Test"}])
