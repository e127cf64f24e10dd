from .completion_client import (
    CompletionError,
    CompletionRetryExhausted,
    call_completion_api,
    request_completion_with_retry,
)
from .prompt_builder import generate_prompt
from .response_parser import extract_competitors, parse_response, split_sections
from .validation_service import validate_business_idea

__all__ = [
    "CompletionError",
    "CompletionRetryExhausted",
    "call_completion_api",
    "request_completion_with_retry",
    "generate_prompt",
    "extract_competitors",
    "parse_response",
    "split_sections",
    "validate_business_idea",
]
