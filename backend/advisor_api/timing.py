"""
Timing Utilities for Latency Instrumentation

Logs how long the completion call and the parsing step take for each
/validate request.
"""

import logging
import time
from contextlib import asynccontextmanager, contextmanager
from typing import Optional

logger = logging.getLogger(__name__)


def log_timing(stage: str, action: str, duration_ms: Optional[float] = None):
    """Log a timing event in standard format."""
    if duration_ms is not None:
        logger.info("[TIMING] %s: %s (duration=%.0fms)", stage, action, duration_ms)
    else:
        logger.info("[TIMING] %s: %s", stage, action)


class StepTimer:
    """
    Times the steps of a single request.

    Usage:
        timer = StepTimer("validate")
        async with timer.async_step("completion"):
            text = await request_completion_with_retry(prompt)
        with timer.step("parse"):
            feedback = parse_response(text)
        timer.summary()
    """

    def __init__(self, stage: str):
        self.stage = stage
        self.steps: dict[str, float] = {}
        self.start_time = time.perf_counter()

    def _record(self, step_name: str, start: float):
        duration_ms = (time.perf_counter() - start) * 1000
        self.steps[step_name] = duration_ms
        log_timing(self.stage, step_name, duration_ms)

    @contextmanager
    def step(self, step_name: str):
        """Time a single step."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._record(step_name, start)

    @asynccontextmanager
    async def async_step(self, step_name: str):
        """Time a single async step."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._record(step_name, start)

    def summary(self) -> float:
        """Log the total elapsed time and return it in milliseconds."""
        total_ms = (time.perf_counter() - self.start_time) * 1000
        log_timing(self.stage, "TOTAL", total_ms)
        return total_ms
