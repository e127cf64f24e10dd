"""
Validation Router

Handles the /validate endpoint for business idea feedback.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ..schemas.validation import ErrorResponse, StructuredFeedbackResponse, ValidateRequest
from ..services.validation_service import validate_business_idea

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal server error"}


router = APIRouter(
    prefix="/validate",
    tags=["Validation"],
    responses={
        422: {"description": "Request body failed validation (FastAPI error detail)"},
        500: {"model": ErrorResponse, "description": "Completion or parsing failure"},
    }
)


@router.post(
    "",
    response_model=StructuredFeedbackResponse,
    status_code=status.HTTP_200_OK,
    summary="Get Feedback on a Business Idea",
    response_description="Feedback sections, with Key Competitors as a list of attribute maps",
)
async def validate_idea(request: ValidateRequest):
    """
    Ask the configured advisor persona for structured feedback on an idea.
    """
    try:
        return await validate_business_idea(request.business_idea, request.advisor_type)
    except Exception:
        logger.exception("[VALIDATE] Error in /validate route")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )
