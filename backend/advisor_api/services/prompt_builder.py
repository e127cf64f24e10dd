"""Prompt construction for business idea feedback.

The structure block lists every heading the parser expects, with the
Key Competitors section expanded into indented "Competitor #n:" blocks so
the attribute lines are never mistaken for top-level headings.
"""

from __future__ import annotations

from ..constants import (
    ADVISOR_PERSONAS,
    COMPETITOR_FIELDS,
    DEFAULT_ADVISOR,
    EXPECTED_SECTIONS,
    KEY_COMPETITORS,
    PROMPT_COMPETITOR_COUNT,
)

_INDENT = "    "


def build_structure_template() -> str:
    """Return the heading skeleton the model is asked to fill in."""
    lines: list[str] = []
    for section in EXPECTED_SECTIONS:
        lines.append(f"{section}:")
        if section == KEY_COMPETITORS:
            for n in range(1, PROMPT_COMPETITOR_COUNT + 1):
                lines.append(f"Competitor #{n}:")
                lines.extend(f"{_INDENT}{name}:" for name in COMPETITOR_FIELDS)
    return "\n" + "\n".join(lines) + "\n"


STRUCTURE_TEMPLATE = build_structure_template()


def resolve_persona(advisor_type: str | None) -> tuple[str, str]:
    """Map an advisor type to its (role, instruction) pair, case-insensitively."""
    key = (advisor_type or "").strip().lower()
    return ADVISOR_PERSONAS.get(key, DEFAULT_ADVISOR)


def generate_prompt(business_idea: str, advisor_type: str | None) -> str:
    """Build the persona-specific feedback prompt for a business idea."""
    base_prompt = (
        f"Provide feedback on this business idea: {business_idea}. "
        f"Structure your response using the following format:\n"
        f"{STRUCTURE_TEMPLATE}\n"
        f"Ensure each section is properly labeled."
    )
    role, instruction = resolve_persona(advisor_type)
    return f"{role}, {base_prompt} {instruction}"
