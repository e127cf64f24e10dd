from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class ValidateRequest(BaseModel):
    """Request body for the /validate endpoint."""

    business_idea: str = Field(
        ...,
        min_length=1,
        alias="businessIdea",
        description="The business idea to get feedback on.",
        examples=[
            "A subscription box delivering locally roasted coffee to remote teams every month"
        ],
    )
    advisor_type: Optional[str] = Field(
        default="",
        alias="advisorType",
        description=(
            "Advisor persona: strategist, cheerleader, realist, roaster, innovator, "
            "skeptic, investor, dreamer, analyst or consumer. Anything else uses "
            "a general advisor."
        ),
    )

    @field_validator("business_idea")
    @classmethod
    def business_idea_not_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("businessIdea must not be blank")
        return stripped

    class Config:
        # Allow fields to be populated by either alias or attribute name
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "businessIdea": "A subscription box delivering locally roasted coffee to remote teams every month",
                "advisorType": "investor",
            }
        }


class StructuredFeedbackResponse(BaseModel):
    """Feedback sections keyed by their heading, always all ten present."""

    summary: str = Field("", alias="Summary")
    market_demand: str = Field("", alias="Market Demand")
    ability_to_pay: str = Field("", alias="Ability to Pay")
    challenges_and_opportunities: str = Field("", alias="Challenges and Opportunities")
    key_competitors: List[Dict[str, str]] = Field(
        default_factory=list,
        alias="Key Competitors",
        description="One attribute map per competitor, typically Name/Strengths/Weaknesses",
    )
    ability_to_scale: str = Field("", alias="Ability to Scale")
    resources_required: str = Field("", alias="Resources Required")
    steps_to_validate: str = Field("", alias="Steps to Validate")
    getting_started: str = Field("", alias="Getting Started")
    constructive_feedback: str = Field("", alias="Constructive Feedback")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Internal server error"])
