"""
FastAPI routes for the recommendation endpoint.

Endpoints:
- POST /recommendations: Draft recommendations for one patient profile
"""

import logging

from fastapi import APIRouter, Depends, Request

from cardio_advisor.schemas.patients import PatientProfile
from cardio_advisor.schemas.recommendations import RecommendationSet
from cardio_advisor.services.recommendation_service import RecommendationGenerator

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)


def get_recommendation_generator(request: Request) -> RecommendationGenerator:
    """Return the generator built at app startup (overridden in tests)."""
    return request.app.state.recommendation_generator


@router.post(
    "",
    response_model=RecommendationSet,
    status_code=200,
    summary="Generate draft recommendations",
    description="""
    Drafts cardiovascular prevention recommendations for physician review.

    **Frontend Flow:**
    1. Clinician fills the patient intake form
    2. POST /recommendations with the patient profile
    3. Display the five recommendation fields for review

    **Failure Behavior:**
    This endpoint always returns 200 with five non-empty fields for a valid
    profile. If Gemini omits a field, that field reads
    "No recommendation generated.". If Gemini cannot be used at all, a
    clinically reviewed default set is returned instead.
    """
)
async def generate_recommendations_endpoint(
    profile: PatientProfile,
    generator: RecommendationGenerator = Depends(get_recommendation_generator)
) -> RecommendationSet:
    """
    Recommendation endpoint.

    - Parse/Validate: Handled by Pydantic PatientProfile
    - Call LLM: Single Gemini call via service layer
    - Map output: Service layer reconciles output into RecommendationSet
    - Return response: FastAPI serializes with camelCase aliases
    """
    logger.info(f"POST /recommendations called for patient_id={profile.pseudonymized_id}")

    # Service layer handles all orchestration and error handling
    response = await generator.generate(profile)

    return response
