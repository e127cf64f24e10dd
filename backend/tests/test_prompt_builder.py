"""Prompt builder tests: structure template and persona selection."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from advisor_api.constants import ADVISOR_TYPES, EXPECTED_SECTIONS
from advisor_api.services.prompt_builder import (
    STRUCTURE_TEMPLATE,
    generate_prompt,
    resolve_persona,
)
from advisor_api.services.response_parser import parse_response, split_sections

IDEA = "A marketplace for renting camping gear"


class TestStructureTemplate:
    def test_lists_every_section_heading(self):
        for section in EXPECTED_SECTIONS:
            assert f"\n{section}:\n" in STRUCTURE_TEMPLATE

    def test_has_three_competitor_blocks(self):
        for n in (1, 2, 3):
            assert f"Competitor #{n}:\n    Name:\n    Strengths:\n    Weaknesses:" in STRUCTURE_TEMPLATE

    def test_template_parses_to_expected_headings(self):
        # The empty skeleton must split into exactly the schema headings
        assert [s.name for s in split_sections(STRUCTURE_TEMPLATE)] == EXPECTED_SECTIONS

    def test_empty_template_parses_to_empty_competitors(self):
        result = parse_response(STRUCTURE_TEMPLATE)
        assert result["Key Competitors"] == [
            {"Name": "", "Strengths": "", "Weaknesses": ""},
        ] * 3


class TestGeneratePrompt:
    def test_contains_idea_and_structure(self):
        prompt = generate_prompt(IDEA, "strategist")
        assert f"Provide feedback on this business idea: {IDEA}." in prompt
        assert STRUCTURE_TEMPLATE in prompt
        assert "Ensure each section is properly labeled." in prompt

    def test_strategist_persona(self):
        prompt = generate_prompt(IDEA, "strategist")
        assert prompt.startswith("As a strategic advisor, Provide feedback")
        assert prompt.endswith("Provide a professional and balanced perspective.")

    def test_persona_is_case_insensitive(self):
        assert generate_prompt(IDEA, "RoAsTeR") == generate_prompt(IDEA, "roaster")

    @pytest.mark.parametrize("advisor_type", ["", None, "wizard"])
    def test_unknown_persona_uses_general_advisor(self, advisor_type):
        prompt = generate_prompt(IDEA, advisor_type)
        assert prompt.startswith("As a general advisor, ")
        assert prompt.endswith("Provide comprehensive feedback on all aspects of the idea.")

    def test_every_persona_has_distinct_phrasing(self):
        personas = {resolve_persona(name) for name in ADVISOR_TYPES}
        assert len(personas) == len(ADVISOR_TYPES) == 10
