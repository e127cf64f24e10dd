"""/validate route tests: success path, error mapping, request validation.

The completion call is mocked; the parser runs for real.
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from advisor_api.constants import EXPECTED_SECTIONS
from advisor_api.main import app
from advisor_api.services.completion_client import CompletionRetryExhausted

client = TestClient(app)

COMPLETION = """Summary:
Solid niche idea.

Market Demand:
---
Growing demand from outdoor hobbyists.

Key Competitors:
Competitor #1:
    Name: GearShare
    Strengths: Large inventory
    Weaknesses: Urban only
"""

REQUEST = {"businessIdea": "A marketplace for renting camping gear", "advisorType": "investor"}


def _mock_completion(**kwargs):
    return patch(
        "advisor_api.services.validation_service.request_completion_with_retry",
        new=AsyncMock(**kwargs),
    )


class TestValidateSuccess:
    def test_returns_all_sections(self):
        with _mock_completion(return_value=COMPLETION):
            res = client.post("/validate", json=REQUEST)

        assert res.status_code == 200, res.text
        data = res.json()
        assert list(data) == EXPECTED_SECTIONS
        assert data["Summary"] == "Solid niche idea."
        assert data["Market Demand"] == "Growing demand from outdoor hobbyists."
        assert data["Key Competitors"] == [
            {"Name": "GearShare", "Strengths": "Large inventory", "Weaknesses": "Urban only"}
        ]
        assert data["Getting Started"] == ""

    def test_prompt_uses_advisor_persona(self):
        with _mock_completion(return_value=COMPLETION) as completion:
            client.post("/validate", json=REQUEST)

        prompt = completion.await_args.args[0]
        assert prompt.startswith("As a potential investor, ")
        assert REQUEST["businessIdea"] in prompt

    def test_advisor_type_is_optional(self):
        with _mock_completion(return_value="") as completion:
            res = client.post("/validate", json={"businessIdea": "Dog walking app"})

        assert res.status_code == 200
        assert completion.await_args.args[0].startswith("As a general advisor, ")
        assert res.json()["Key Competitors"] == []

    def test_unstructured_completion_degrades_to_defaults(self):
        with _mock_completion(return_value="Sorry, I cannot help with that."):
            res = client.post("/validate", json=REQUEST)

        assert res.status_code == 200
        data = res.json()
        assert set(data) == set(EXPECTED_SECTIONS)
        assert all(data[k] == "" for k in EXPECTED_SECTIONS if k != "Key Competitors")


class TestValidateErrors:
    def test_retry_exhaustion_returns_500(self):
        with _mock_completion(side_effect=CompletionRetryExhausted(3)):
            res = client.post("/validate", json=REQUEST)

        assert res.status_code == 500
        assert res.json() == {"error": "Internal server error"}

    def test_unexpected_error_does_not_leak_detail(self):
        with _mock_completion(side_effect=RuntimeError("secret stack detail")):
            res = client.post("/validate", json=REQUEST)

        assert res.status_code == 500
        assert "secret" not in res.text
        assert res.json() == {"error": "Internal server error"}

    def test_missing_business_idea_is_rejected(self):
        res = client.post("/validate", json={"advisorType": "skeptic"})
        assert res.status_code == 422

    def test_blank_business_idea_is_rejected(self):
        with _mock_completion(return_value="") as completion:
            res = client.post("/validate", json={"businessIdea": "   ", "advisorType": "x"})

        assert res.status_code == 422
        completion.assert_not_awaited()

    def test_business_idea_is_trimmed_before_prompting(self):
        with _mock_completion(return_value="") as completion:
            res = client.post("/validate", json={"businessIdea": "  Dog walking app  "})

        assert res.status_code == 200
        assert "business idea: Dog walking app." in completion.await_args.args[0]

    def test_openapi_documents_validation_error(self):
        responses = client.get("/openapi.json").json()["paths"]["/validate"]["post"]["responses"]
        assert {"200", "422", "500"} <= set(responses)


class TestGeneralEndpoints:
    def test_root(self):
        res = client.get("/")
        assert res.status_code == 200
        assert res.json()["endpoints"]["validate"].startswith("POST /validate")

    def test_health(self):
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json()["status"] == "healthy"
