"""Pytest configuration and fixtures."""

import asyncio
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from studio_core.config import Settings  # noqa: E402
from studio_core.models import NetworkResponse  # noqa: E402


CHAT_URL = "http://test/api/chat"
INTAKE_URL = "http://intake.test/submit"


@pytest.fixture
def settings():
    """Settings pointing at test endpoints, no reply delay."""
    return Settings(
        chat_api_url=CHAT_URL,
        intake_url=INTAKE_URL,
        access_key="test-access-key",
        reply_delay=0.0,
        http_timeout=1.0,
    )


@pytest.fixture
def mock_network():
    """Create mock network client answering 200 {} by default."""
    network = Mock()
    network.request = AsyncMock(return_value=NetworkResponse(200, {}))
    return network


@pytest.fixture
def mock_completion():
    """Create mock completion client."""
    client = Mock()
    client.complete = AsyncMock(return_value="Remote answer")
    return client


@pytest.fixture
def mock_llm():
    """Create mock LLM provider."""
    llm = Mock()
    llm.complete = AsyncMock(return_value="Test response")
    return llm


@pytest.fixture
def resolver():
    """Resolver over the site FAQ table."""
    from studio_core.knowledge import KnowledgeResolver

    return KnowledgeResolver()


@pytest.fixture
def dialogue_session():
    """Empty dialogue session without greeting."""
    from studio_core.models import DialogueSession

    return DialogueSession()


@pytest.fixture
def dialogue_controller(dialogue_session, resolver, mock_completion):
    """Create DialogueController for testing."""
    from studio_core.dialogue import DialogueController

    return DialogueController(
        session=dialogue_session,
        resolver=resolver,
        completion_client=mock_completion,
    )


@pytest.fixture
def submission_controller(mock_network):
    """Create SubmissionController for testing."""
    from studio_core.forms import SubmissionController

    return SubmissionController(
        network=mock_network,
        intake_url=INTAKE_URL,
        access_key="test-access-key",
    )


@pytest.fixture
def blocking():
    """Factory of AsyncMock side effects that wait until released."""
    release = asyncio.Event()

    def make(result):
        async def side_effect(*args, **kwargs):
            await release.wait()
            if isinstance(result, BaseException):
                raise result
            return result

        return side_effect

    make.release = release
    return make


@pytest.fixture
def wait_until():
    """Yield to the event loop until predicate() holds."""

    async def wait(predicate, attempts: int = 50) -> None:
        for _ in range(attempts):
            if predicate():
                return
            await asyncio.sleep(0)
        raise AssertionError("condition not reached")

    return wait
