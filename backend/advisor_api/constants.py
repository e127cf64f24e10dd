"""Centralized constants shared by the prompt builder and the response parser.

The section list is the SINGLE SOURCE OF TRUTH for the feedback layout:
the prompt asks the model for exactly these headings and the parser
returns exactly these keys, in this order.
"""

from __future__ import annotations

# ── Feedback sections ───────────────────────────────────────────────────
# LOCKED: /validate JSON clients read these keys verbatim.

KEY_COMPETITORS = "Key Competitors"

EXPECTED_SECTIONS: list[str] = [
    "Summary",
    "Market Demand",
    "Ability to Pay",
    "Challenges and Opportunities",
    KEY_COMPETITORS,
    "Ability to Scale",
    "Resources Required",
    "Steps to Validate",
    "Getting Started",
    "Constructive Feedback",
]

# Number of "Competitor #n:" blocks requested in the prompt
PROMPT_COMPETITOR_COUNT = 3

COMPETITOR_FIELDS: list[str] = ["Name", "Strengths", "Weaknesses"]

# ── Advisor personas ────────────────────────────────────────────────────
# persona -> (opening role, closing instruction)

DEFAULT_ADVISOR = (
    "As a general advisor",
    "Provide comprehensive feedback on all aspects of the idea.",
)

ADVISOR_PERSONAS: dict[str, tuple[str, str]] = {
    "strategist": (
        "As a strategic advisor",
        "Provide a professional and balanced perspective.",
    ),
    "cheerleader": (
        "As an enthusiastic supporter",
        "Provide overly positive feedback.",
    ),
    "realist": (
        "As a pragmatic advisor",
        "Be brutally honest and direct about the flaws.",
    ),
    "roaster": (
        "As a humorous critic",
        "Roast this idea humorously while still providing constructive feedback.",
    ),
    "innovator": (
        "As an innovation expert",
        "Analyze how innovative and disruptive this idea is.",
    ),
    "skeptic": (
        "As a skeptical advisor",
        "Focus on the potential risks and challenges.",
    ),
    "investor": (
        "As a potential investor",
        "Evaluate this idea from an investment perspective.",
    ),
    "dreamer": (
        "As a visionary thinker",
        "Provide feedback on how this idea could change the world.",
    ),
    "analyst": (
        "As a data-driven analyst",
        "Analyze this idea from a quantitative perspective.",
    ),
    "consumer": (
        "As a potential consumer",
        "Provide feedback from a user's perspective.",
    ),
}

ADVISOR_TYPES: list[str] = list(ADVISOR_PERSONAS)
