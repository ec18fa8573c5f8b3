"""Configuration for the phishing content detector."""

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    max_content_length: int = 20000
    assistant_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    assistant_model: str = "gemini-pro"
    assistant_api_key: str = ""
    assistant_timeout: float = 15.0
    assistant_max_tokens: int = 1024
    user_agent: str = "PhishContentDetector/1.0 (+https://example.com)"


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_settings() -> Settings:
    """Load settings from environment variables with safe defaults."""
    return Settings(
        log_level=os.getenv("PHISH_LOG_LEVEL", Settings.log_level).upper(),
        max_content_length=max(_env_int("PHISH_MAX_CONTENT_LENGTH", Settings.max_content_length), 0),
        assistant_url=os.getenv("PHISH_ASSISTANT_URL", Settings.assistant_url).rstrip("/"),
        assistant_model=os.getenv("PHISH_ASSISTANT_MODEL", Settings.assistant_model),
        assistant_api_key=os.getenv("PHISH_ASSISTANT_API_KEY") or os.getenv("GEMINI_API_KEY", ""),
        assistant_timeout=_env_float("PHISH_ASSISTANT_TIMEOUT", Settings.assistant_timeout),
        assistant_max_tokens=_env_int("PHISH_ASSISTANT_MAX_TOKENS", Settings.assistant_max_tokens),
        user_agent=os.getenv("PHISH_USER_AGENT", Settings.user_agent),
    )


def resolve_log_level(name: str) -> int:
    """Map a level name such as "debug" to its number; unknown names give WARNING."""
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(level: str) -> None:
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


def clip(content: str, limit: int) -> str:
    """Cut content to limit characters; a limit of 0 disables clipping."""
    if limit and len(content) > limit:
        logger.warning("content truncated from %d to %d characters", len(content), limit)
        return content[:limit]
    return content
