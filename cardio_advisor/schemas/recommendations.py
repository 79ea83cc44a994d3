"""
Pydantic schema for the recommendation set returned to the caller.

The five fields mirror the Gemini output contract defined in
cardio_advisor/agents/recommendation/schemas.py. Aliases are the camelCase
keys used on the wire, both with Gemini and with the web client.
"""

from pydantic import BaseModel, ConfigDict, Field


class RecommendationSet(BaseModel):
    """
    Draft recommendations for physician review.

    INVARIANT: all five fields are always present and non-empty, whether
    they came from Gemini, from the per-field placeholder, or from the
    reviewed fallback set.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    blood_pressure: str = Field(
        ...,
        alias="bloodPressure",
        description="Recommendation for blood pressure management",
        min_length=1
    )
    statin_management: str = Field(
        ...,
        alias="statinManagement",
        description="Recommendation for statin and lipid management",
        min_length=1
    )
    aspirin_usage: str = Field(
        ...,
        alias="aspirinUsage",
        description="Recommendation on aspirin usage for primary prevention",
        min_length=1
    )
    exercise: str = Field(
        ...,
        description="Recommendation for physical exercise",
        min_length=1
    )
    lifestyle: str = Field(
        ...,
        description="Recommendation for lifestyle and diet changes",
        min_length=1
    )
