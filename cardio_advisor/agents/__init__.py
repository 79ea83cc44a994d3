"""
AI Components for Cardio Advisor Backend.

1. Recommendation Agent (Single-Shot Structured Output)
   - Uses Gemini with a response schema to draft five recommendation categories
   - NOT an ADK agent - uses the Google Gen AI SDK directly
   - Reconciliation and fallback live in: cardio_advisor/services/recommendation_service.py
"""

from cardio_advisor.agents.recommendation import (
    OUTPUT_SCHEMA as RECOMMENDATION_OUTPUT_SCHEMA,
)
from cardio_advisor.agents.recommendation import (
    GeminiContentClient,
    GenerativeContentClient,
    build_recommendation_prompt,
)

__all__ = [
    "GeminiContentClient",
    "GenerativeContentClient",
    "build_recommendation_prompt",
    "RECOMMENDATION_OUTPUT_SCHEMA",
]
