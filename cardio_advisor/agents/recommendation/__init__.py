"""
Recommendation Agent Package

Single-shot Gemini workflow that drafts cardiovascular prevention
recommendations for physician review.

Main Components:
- prompts: System prompt and deterministic user prompt builder
- schemas: Structured-output contract (five required string fields)
- types: GenerationOutcome result type (OK | FAILED)
- client: GenerativeContentClient capability and its Gemini implementation

The service layer that reconciles Gemini output and applies the reviewed
fallback is in:
- cardio_advisor/services/recommendation_service.py
"""

from cardio_advisor.agents.recommendation.client import (
    GeminiContentClient,
    GenerativeContentClient,
)
from cardio_advisor.agents.recommendation.prompts import (
    RECOMMENDATION_CATEGORIES,
    RECOMMENDATION_SYSTEM_PROMPT,
    build_recommendation_prompt,
)
from cardio_advisor.agents.recommendation.schemas import (
    OUTPUT_SCHEMA,
    REQUIRED_RECOMMENDATION_FIELDS,
)
from cardio_advisor.agents.recommendation.types import (
    GenerationFailed,
    GenerationOutcome,
    GenerationSucceeded,
)

__all__ = [
    # Clients
    "GenerativeContentClient",
    "GeminiContentClient",
    # Prompts
    "RECOMMENDATION_SYSTEM_PROMPT",
    "RECOMMENDATION_CATEGORIES",
    "build_recommendation_prompt",
    # Schemas
    "OUTPUT_SCHEMA",
    "REQUIRED_RECOMMENDATION_FIELDS",
    # Types
    "GenerationOutcome",
    "GenerationSucceeded",
    "GenerationFailed",
]
