"""
Pydantic schemas for API request and response validation.

All FastAPI endpoints MUST use strict Pydantic models with explicit types.
"""

from .health import HealthResponse
from .patients import PatientProfile
from .recommendations import RecommendationSet

__all__ = [
    "HealthResponse",
    "PatientProfile",
    "RecommendationSet",
]
