"""
Logging utilities for Cardio Advisor Backend.

Provides standardized logger configuration following privacy rules.

CRITICAL PRIVACY RULES:
- NEVER log clinical values (age, blood pressure, cholesterol, diagnoses)
- NEVER log full prompts sent to Gemini (they embed the patient profile)
- NEVER log generated recommendation text
- NEVER log API keys or secrets

Acceptable logging:
- High-level events (e.g., "Generating recommendations for patient_id=...")
- The pseudonymized patient identifier (it carries no clinical data)
- Names of fields missing from a model response
- Error types and sanitized error messages
"""

import logging
from typing import Optional

from cardio_advisor.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to LOG_LEVEL setting)

    Returns:
        Configured logger instance

    Usage:
        >>> from cardio_advisor.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
