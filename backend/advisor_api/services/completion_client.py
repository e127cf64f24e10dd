"""Anthropic text-completions client with linear-backoff retries.

All feedback requests MUST go through `request_completion_with_retry()`.
This ensures:
  - Endpoint, model, temperature, timeout and token limits come from env.
  - Attempts are strictly sequential, up to MAX_RETRIES in total.
  - Failed attempt n waits n x RETRY_BASE_DELAY before the next one.
  - Exhaustion raises CompletionRetryExhausted.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import httpx

from ..config import ANTHROPIC_VERSION, Settings, get_settings
from ..http_client import get_client, request_timeout

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Raised when a single completion call fails."""


class CompletionRetryExhausted(CompletionError):
    """Raised when every completion attempt has failed."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Failed to generate response after {attempts} attempts")


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "x-api-key": api_key,
        "anthropic-version": ANTHROPIC_VERSION,
    }


def build_payload(prompt: str, settings: Settings) -> Dict[str, Any]:
    """Build a text-completions payload in Human/Assistant turn format."""
    return {
        "model": settings.model,
        "prompt": f"\n\nHuman: {prompt}\n\nAssistant:",
        "max_tokens_to_sample": settings.max_tokens,
        "temperature": settings.temperature,
    }


def backoff_delay(attempt: int, base_delay: float) -> float:
    """Delay in seconds after the given failed attempt (1-based)."""
    return attempt * base_delay


async def _backoff(attempt: int, base_delay: float) -> None:
    delay = backoff_delay(attempt, base_delay)
    logger.info("[COMPLETION] Retrying in %.1fs", delay)
    await asyncio.sleep(delay)


async def call_completion_api(
    prompt: str,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Perform one completion call and return the completion text.

    Raises CompletionError on a missing key, transport error, non-2xx
    status or a body without a "completion" string.
    """
    settings = settings or get_settings()
    if not settings.api_key:
        logger.warning("[COMPLETION] API key missing (CLAUDE_API_KEY)")
        raise CompletionError("CLAUDE_API_KEY environment variable not set")

    client = client or await get_client()
    t0 = time.perf_counter()
    try:
        response = await client.post(
            settings.api_url,
            headers=build_headers(settings.api_key),
            json=build_payload(prompt, settings),
            timeout=request_timeout(settings.request_timeout),
        )
    except httpx.HTTPError as exc:
        logger.error("[COMPLETION] Transport error: %s", exc)
        raise CompletionError(f"Transport error: {exc}") from exc

    duration = time.perf_counter() - t0
    logger.info("[COMPLETION] HTTP %d (%.1fs)", response.status_code, duration)

    if not response.is_success:
        logger.error("[COMPLETION] Error response: %s", response.text[:400])
        raise CompletionError(f"Completion API returned HTTP {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        raise CompletionError("Completion API returned a non-JSON body") from exc

    completion = data.get("completion") if isinstance(data, dict) else None
    if not isinstance(completion, str):
        raise CompletionError("Completion API response has no completion text")

    logger.info("[COMPLETION] Output length: %d chars", len(completion))
    return completion


async def request_completion_with_retry(
    prompt: str,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Call the completion API, retrying with linear backoff."""
    settings = settings or get_settings()
    max_attempts = settings.max_retries

    for attempt in range(1, max_attempts + 1):
        logger.info("[COMPLETION] Calling %s (attempt %d/%d)",
                    settings.model, attempt, max_attempts)
        try:
            return await call_completion_api(prompt, settings=settings, client=client)
        except CompletionError as exc:
            logger.warning("[COMPLETION] Attempt %d/%d failed: %s",
                           attempt, max_attempts, exc)
            if attempt < max_attempts:
                await _backoff(attempt, settings.retry_base_delay)

    raise CompletionRetryExhausted(max_attempts)
