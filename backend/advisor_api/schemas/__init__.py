# Schemas package
from .validation import ErrorResponse, StructuredFeedbackResponse, ValidateRequest

__all__ = [
    "ValidateRequest",
    "StructuredFeedbackResponse",
    "ErrorResponse",
]
