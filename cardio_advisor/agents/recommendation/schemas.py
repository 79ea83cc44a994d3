"""
Recommendation Output Contract

Structured-output schema sent to Gemini with every request. The model is
instructed to return a JSON object with exactly these five string fields,
all mandatory.

The schema is built once at import time and shared read-only by every
request.
"""

from typing import Dict, Tuple

from google.genai import types

# Wire names, in the order the categories are listed in the prompt
REQUIRED_RECOMMENDATION_FIELDS: Tuple[str, ...] = (
    "bloodPressure",
    "statinManagement",
    "aspirinUsage",
    "exercise",
    "lifestyle",
)

FIELD_DESCRIPTIONS: Dict[str, str] = {
    "bloodPressure": "Recommendation for blood pressure management.",
    "statinManagement": "Recommendation for statin and lipid management.",
    "aspirinUsage": "Recommendation on aspirin usage for primary prevention.",
    "exercise": "Recommendation for physical exercise.",
    "lifestyle": "Recommendation for lifestyle and diet changes.",
}

# Output schema for the recommendation request
OUTPUT_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        field_name: types.Schema(
            type=types.Type.STRING,
            description=FIELD_DESCRIPTIONS[field_name],
        )
        for field_name in REQUIRED_RECOMMENDATION_FIELDS
    },
    required=list(REQUIRED_RECOMMENDATION_FIELDS),
    property_ordering=list(REQUIRED_RECOMMENDATION_FIELDS),
)
