"""
Recommendation Service - Gemini with Structured Output

This service drafts cardiovascular prevention recommendations for physician
review using Google's Gemini model with a strict response schema.

Architecture:
- Pattern: Single-shot LLM (one API call per request, no retries)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- API: Google Gen AI Python SDK (google-genai), behind GenerativeContentClient
- Output: JSON object with five required string fields (OUTPUT_SCHEMA)

Failure handling (nothing is ever raised to the caller):
- A field missing or empty in an otherwise valid response is replaced by
  PLACEHOLDER_RECOMMENDATION; the other fields are kept.
- A transport error, a missing API key, or a response that is not a JSON
  object discards the whole attempt and returns FALLBACK_RECOMMENDATIONS.
"""

import json
from typing import Any, Dict

from cardio_advisor.agents.recommendation.client import (
    GeminiContentClient,
    GenerativeContentClient,
)
from cardio_advisor.agents.recommendation.prompts import build_recommendation_prompt
from cardio_advisor.agents.recommendation.schemas import (
    OUTPUT_SCHEMA,
    REQUIRED_RECOMMENDATION_FIELDS,
)
from cardio_advisor.agents.recommendation.types import GenerationOutcome
from cardio_advisor.schemas.patients import PatientProfile
from cardio_advisor.schemas.recommendations import RecommendationSet
from cardio_advisor.utils.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_RECOMMENDATION = "No recommendation generated."

# Clinically reviewed set served when Gemini cannot be used at all
FALLBACK_RECOMMENDATIONS = RecommendationSet(
    bloodPressure=(
        "Based on ACC guidelines for a risk score >10% and a BP of 142 mmHg, lifestyle "
        "modifications are essential. Consider initiating or intensifying antihypertensive "
        "medication to target a BP <130/80 mmHg."
    ),
    statinManagement=(
        "For patients aged 40-75 with a 10-year risk >7.5%, a moderate-to-high intensity "
        "statin therapy is recommended. Discuss the risks and benefits of initiating a "
        "statin like Atorvastatin or Rosuvastatin."
    ),
    aspirinUsage=(
        "Low-dose aspirin is no longer routinely recommended for primary prevention in "
        "patients over 60 due to bleeding risks. This should generally be avoided unless "
        "a specific compelling indication exists."
    ),
    exercise=(
        "Aim for at least 150 minutes of moderate-intensity aerobic activity (like brisk "
        "walking or cycling) or 75 minutes of vigorous-intensity activity per week, plus "
        "muscle-strengthening activities on 2 or more days."
    ),
    lifestyle=(
        "Adopt a heart-healthy diet rich in fruits, vegetables, and whole grains, and low "
        "in sodium and saturated fats (e.g., DASH or Mediterranean diet). If applicable, "
        "smoking cessation is the single most effective lifestyle change."
    ),
)


def _parse_llm_response(response_text: str) -> GenerationOutcome:
    """
    Parse raw Gemini text into a GenerationOutcome.

    Unparseable text and JSON null are failures. Any other JSON value is a
    success; values that are not objects carry no fields, so every field is
    reconciled to the placeholder in _reconcile_recommendations.
    """
    content = response_text.strip()

    try:
        response_data = json.loads(content)
    except json.JSONDecodeError as e:
        return {
            "status": "FAILED",
            "data": None,
            "reason": f"Failed to parse JSON response: {e}",
            "error": e,
        }

    if response_data is None:
        return {
            "status": "FAILED",
            "data": None,
            "reason": "Gemini returned JSON null instead of an object",
            "error": None,
        }

    if not isinstance(response_data, dict):
        logger.warning(
            f"Expected a JSON object from Gemini, got {type(response_data).__name__}; "
            "all fields will use the placeholder"
        )
        response_data = {}

    return {
        "status": "OK",
        "data": response_data,
        "reason": None,
        "error": None,
    }


def _reconcile_recommendations(response_data: Dict[str, Any]) -> RecommendationSet:
    """
    Build a RecommendationSet from a parsed response, field by field.

    A present, truthy string is used verbatim. Anything else (absent, null,
    empty string, non-string) is replaced by PLACEHOLDER_RECOMMENDATION.
    """
    values: Dict[str, str] = {}

    for field_name in REQUIRED_RECOMMENDATION_FIELDS:
        value = response_data.get(field_name)
        if value and isinstance(value, str):
            values[field_name] = value
        else:
            logger.warning(f"Gemini response missing field '{field_name}', using placeholder")
            values[field_name] = PLACEHOLDER_RECOMMENDATION

    return RecommendationSet.model_validate(values)


class RecommendationGenerator:
    """
    Turns a PatientProfile into a complete RecommendationSet.

    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, content_client: GenerativeContentClient):
        self.content_client = content_client

    async def generate(self, profile: PatientProfile) -> RecommendationSet:
        """
        Generate draft recommendations for one patient.

        This function:
        1. Builds the deterministic prompt from the profile
        2. Calls Gemini once with the OUTPUT_SCHEMA contract
        3. Reconciles the parsed response field by field
        4. Falls back to FALLBACK_RECOMMENDATIONS on any total failure

        Args:
            profile: Validated patient profile (caller-owned, not stored)

        Returns:
            RecommendationSet with all five fields non-empty. Never raises.
        """
        logger.info(f"Generating recommendations for patient_id={profile.pseudonymized_id}")

        prompt = build_recommendation_prompt(profile)
        outcome = await self._request_recommendations(prompt)

        if outcome["status"] == "FAILED":
            logger.error(
                f"Error generating recommendations from Gemini API: {outcome['reason']}",
                exc_info=outcome["error"],
            )
            return FALLBACK_RECOMMENDATIONS.model_copy()

        return _reconcile_recommendations(outcome["data"])

    async def _request_recommendations(self, prompt: str) -> GenerationOutcome:
        """Single Gemini round trip; every exception becomes a FAILED outcome."""
        try:
            response_text = await self.content_client.generate_structured_content(
                prompt,
                OUTPUT_SCHEMA,
            )
            return _parse_llm_response(response_text)
        except Exception as e:
            return {
                "status": "FAILED",
                "data": None,
                "reason": f"Error calling Gemini API: {e}",
                "error": e,
            }


def build_recommendation_generator() -> RecommendationGenerator:
    """Create a generator backed by Gemini, configured from settings."""
    return RecommendationGenerator(GeminiContentClient())
