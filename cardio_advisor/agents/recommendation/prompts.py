"""
Recommendation Prompt Templates

Contains the system prompt and user prompt builder for the recommendation
generator.

Architecture:
- Pattern: Single-shot LLM with structured output (response_schema)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Output: JSON object with the five fields in OUTPUT_SCHEMA

The user prompt is a pure function of the clinical fields of the profile.
The pseudonymized identifier is never part of it.
"""

from cardio_advisor.schemas.patients import PatientProfile

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

RECOMMENDATION_SYSTEM_PROMPT = """You are a medical AI assistant providing draft recommendations for a cardiologist to review.

<limitations>
- Your output is a draft for physician review, never a final clinical decision
- Base every recommendation on established ACC/AHA cardiovascular prevention guidelines
- Do not invent patient data that is not in the profile
</limitations>

<output_format>
Always return a JSON object matching the response schema.
No markdown code blocks, no explanatory text, only the JSON object.
</output_format>"""


# Category headings, in the same order as REQUIRED_RECOMMENDATION_FIELDS
RECOMMENDATION_CATEGORIES = (
    "Blood Pressure Management",
    "Statin & Lipid Management",
    "Aspirin Usage",
    "Exercise Recommendation",
    "Lifestyle & Diet",
)


def _format_measurement(value: float) -> str:
    """Render 142.0 as "142" and 142.5 as "142.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_recommendation_prompt(profile: PatientProfile) -> str:
    """
    Build the user prompt for one patient profile.

    The prompt contains:
    - The task statement (draft recommendations for cardiologist review)
    - Every clinical field of the profile in a fixed order
    - The five output categories, by name and in order

    Identical profiles always produce byte-identical prompts.

    Args:
        profile: Validated patient profile

    Returns:
        str: Formatted user prompt ready to be sent to Gemini
    """
    categories = "\n".join(
        f"{index}. {category}"
        for index, category in enumerate(RECOMMENDATION_CATEGORIES, start=1)
    )

    return f"""Based on ACC/AHA guidelines, generate concise, actionable draft recommendations for physician review for the following patient profile.
The output must be a JSON object.

<patient_data>
- Age: {profile.age}
- Sex: {profile.sex}
- Race: {profile.race}
- Systolic Blood Pressure: {_format_measurement(profile.systolic_bp)} mmHg
- Total Cholesterol: {_format_measurement(profile.total_cholesterol)} mg/dL
- HDL Cholesterol: {_format_measurement(profile.hdl_cholesterol)} mg/dL
- Smoker: {_yes_no(profile.is_smoker)}
- On Hypertension Medication: {_yes_no(profile.on_htn_meds)}
- Has Diabetes: {_yes_no(profile.has_diabetes)}
</patient_data>

<categories>
Generate recommendations for the following categories:
{categories}
</categories>"""
