"""
FastAPI application entry point for Cardio Advisor backend.

This module creates the FastAPI app instance, builds the recommendation
generator, and registers all routers.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from cardio_advisor.config import settings
from cardio_advisor.routes.health import router as health_router
from cardio_advisor.routes.recommendations import router as recommendations_router
from cardio_advisor.services.recommendation_service import build_recommendation_generator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    Environment-based configuration:
    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS env var
    - ENVIRONMENT=testing/development: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
            return origins

        logger.warning(
            "CORS_ALLOWED_ORIGINS not set in production. "
            "No web origins allowed. Set CORS_ALLOWED_ORIGINS for the intake form."
        )
        return []

    # Development/Testing: Allow all for local development
    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Cardio Advisor API",
    description="Draft cardiovascular prevention recommendations for physician review",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Gemini-backed generator, shared by all requests (holds no per-request state)
app.state.recommendation_generator = build_recommendation_generator()


# Custom validation error handler to log validation failures
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log validation error locations for debugging.

    The request body is never logged: it contains patient data.
    """
    error_locations = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {error_locations}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": [
                {"loc": error["loc"], "msg": error["msg"], "type": error["type"]}
                for error in exc.errors()
            ],
        }
    )

# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(recommendations_router)

logger.info("FastAPI app initialized successfully")
