"""Runtime configuration: read from environment with safe defaults.

Variables (``.env`` is loaded first):
  CLAUDE_API_KEY: required for completion calls
  CLAUDE_API_URL: text completions endpoint
  CLAUDE_MODEL: model name (default claude-2.1)
  CLAUDE_MAX_TOKENS: max_tokens_to_sample (default 1000)
  CLAUDE_TEMPERATURE: sampling temperature (default 0.7)
  CLAUDE_REQUEST_TIMEOUT: per-request timeout in seconds (default 60)
  MAX_RETRIES: total completion attempts (default 3)
  RETRY_BASE_DELAY: linear backoff unit in seconds (default 1.0)
  HOST / PORT: listen address (default 0.0.0.0:3000)
  CORS_ORIGINS: comma-separated origins (default "*")
  LOG_LEVEL: logging level (default INFO)
  DEBUG: "true" enables uvicorn reload
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.anthropic.com/v1/complete"
DEFAULT_MODEL = "claude-2.1"
ANTHROPIC_VERSION = "2023-06-01"


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


def _env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).strip().lower() == "true"


def _env_list(key: str, default: str) -> List[str]:
    raw = os.getenv(key, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = 1000
    temperature: float = 0.7
    request_timeout: float = 60.0
    max_retries: int = 3
    retry_base_delay: float = 1.0
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    debug: bool = False


def get_settings() -> Settings:
    """Build a Settings snapshot from the current environment."""
    return Settings(
        api_key=os.getenv("CLAUDE_API_KEY", "").strip(),
        api_url=os.getenv("CLAUDE_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL,
        model=os.getenv("CLAUDE_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
        max_tokens=_env_int("CLAUDE_MAX_TOKENS", 1000),
        temperature=_env_float("CLAUDE_TEMPERATURE", 0.7),
        request_timeout=_env_float("CLAUDE_REQUEST_TIMEOUT", 60.0),
        # At least one attempt is always made
        max_retries=max(1, _env_int("MAX_RETRIES", 3)),
        retry_base_delay=max(0.0, _env_float("RETRY_BASE_DELAY", 1.0)),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_int("PORT", 3000),
        cors_origins=_env_list("CORS_ORIGINS", "*"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=_env_bool("DEBUG"),
    )
