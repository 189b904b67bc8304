"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_API_HOST = "localhost"
DEFAULT_API_PORT = 8000
DEFAULT_INTAKE_URL = "https://api.web3forms.com/submit"
DEFAULT_REPLY_DELAY = 0.5  # seconds
DEFAULT_HTTP_TIMEOUT = 10.0  # seconds
DEFAULT_MAX_SESSIONS = 1000
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class Settings:
    """Runtime settings snapshot."""

    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    chat_api_url: str = f"http://{DEFAULT_API_HOST}:{DEFAULT_API_PORT}/api/chat"
    intake_url: str = DEFAULT_INTAKE_URL
    access_key: str = ""
    reply_delay: float = DEFAULT_REPLY_DELAY
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    max_sessions: int = DEFAULT_MAX_SESSIONS
    anthropic_api_key: str | None = None
    anthropic_model: str = DEFAULT_ANTHROPIC_MODEL

    def __post_init__(self) -> None:
        if self.max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        api_host = os.getenv("API_HOST", DEFAULT_API_HOST)
        api_port = _env_int("API_PORT", DEFAULT_API_PORT)

        # The chat widget talks to this service's own /api/chat unless told otherwise
        chat_api_url = os.getenv("CHAT_API_URL") or f"http://{api_host}:{api_port}/api/chat"

        reply_delay = _env_float("REPLY_DELAY", DEFAULT_REPLY_DELAY)
        if reply_delay < 0:
            raise ValueError("REPLY_DELAY must not be negative")

        max_sessions = _env_int("MAX_SESSIONS", DEFAULT_MAX_SESSIONS)
        if max_sessions < 1:
            raise ValueError("MAX_SESSIONS must be at least 1")

        return cls(
            api_host=api_host,
            api_port=api_port,
            chat_api_url=chat_api_url,
            intake_url=os.getenv("INTAKE_URL", DEFAULT_INTAKE_URL),
            access_key=os.getenv("WEB3FORMS_ACCESS_KEY", ""),
            reply_delay=reply_delay,
            http_timeout=_env_float("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            max_sessions=max_sessions,
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            anthropic_model=os.getenv("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL),
        )
