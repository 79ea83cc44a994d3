"""
Service layer for Cardio Advisor Backend.

Contains business logic orchestration that:
- Builds prompts and calls the Gemini content client
- Reconciles model output into Pydantic ResponseModels
- Absorbs every model failure into a reviewed fallback result

Services act as the glue between routes (HTTP layer) and agents.
"""

from .recommendation_service import (
    FALLBACK_RECOMMENDATIONS,
    PLACEHOLDER_RECOMMENDATION,
    RecommendationGenerator,
    build_recommendation_generator,
)

__all__ = [
    "RecommendationGenerator",
    "build_recommendation_generator",
    "FALLBACK_RECOMMENDATIONS",
    "PLACEHOLDER_RECOMMENDATION",
]
