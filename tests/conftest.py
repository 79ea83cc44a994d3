"""
Pytest configuration for Cardio Advisor backend tests.

Sets up test environment and global fixtures.
"""
import os
from typing import List, Optional

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
os.environ["GEMINI_MODEL"] = "gemini-2.5-flash"

from cardio_advisor.agents.recommendation.client import GenerativeContentClient  # noqa: E402
from cardio_advisor.schemas.patients import PatientProfile  # noqa: E402


class FakeContentClient(GenerativeContentClient):
    """
    Test double for the Gemini content client.

    Returns `response_text` or raises `error`, and records every prompt and
    schema it receives.
    """

    def __init__(self, response_text: str = "", error: Optional[Exception] = None):
        self.response_text = response_text
        self.error = error
        self.prompts: List[str] = []
        self.schemas: List[object] = []

    async def generate_structured_content(self, prompt, response_schema):
        self.prompts.append(prompt)
        self.schemas.append(response_schema)
        if self.error is not None:
            raise self.error
        return self.response_text


@pytest.fixture
def fake_content_client():
    """Factory for FakeContentClient instances."""
    def _make(response_text: str = "", error: Optional[Exception] = None) -> FakeContentClient:
        return FakeContentClient(response_text=response_text, error=error)
    return _make


@pytest.fixture
def patient_profile() -> PatientProfile:
    """Typical intake form submission (camelCase keys, as sent by the web client)."""
    return PatientProfile.model_validate({
        "pseudonymizedId": "PT-4F9A21",
        "age": 58,
        "sex": "Male",
        "race": "White",
        "systolicBP": 142,
        "totalCholesterol": 213,
        "hdlCholesterol": 50,
        "isSmoker": True,
        "onHTNMeds": False,
        "hasDiabetes": False,
    })


@pytest.fixture
def gemini_complete_response():
    """Gemini output with all five fields populated."""
    return {
        "bloodPressure": "Start an ACE inhibitor and recheck BP in 4 weeks; target <130/80 mmHg.",
        "statinManagement": "Initiate moderate-intensity statin therapy (e.g., atorvastatin 20 mg).",
        "aspirinUsage": "Aspirin for primary prevention is not recommended given bleeding risk.",
        "exercise": "150 minutes per week of moderate-intensity aerobic activity.",
        "lifestyle": "Smoking cessation with pharmacotherapy support; DASH-style diet.",
    }
