"""Business idea validation: prompt -> completion -> structured feedback."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config import Settings
from ..timing import StepTimer
from .completion_client import request_completion_with_retry
from .prompt_builder import generate_prompt
from .response_parser import StructuredFeedback, parse_response

logger = logging.getLogger(__name__)


async def validate_business_idea(
    business_idea: str,
    advisor_type: Optional[str],
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> StructuredFeedback:
    """Ask the model for feedback on an idea and parse it into sections.

    Raises CompletionRetryExhausted when the model could not be reached.
    """
    timer = StepTimer("validate")
    prompt = generate_prompt(business_idea, advisor_type)
    logger.info("[VALIDATE] advisor=%r idea_length=%d",
                advisor_type or "general", len(business_idea))

    async with timer.async_step("completion"):
        raw_text = await request_completion_with_retry(
            prompt, settings=settings, client=client
        )

    with timer.step("parse"):
        feedback = parse_response(raw_text)

    timer.summary()
    return feedback
