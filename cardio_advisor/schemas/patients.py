"""
Pydantic schema for the patient profile submitted by the intake form.

Field aliases match the camelCase keys sent by the web client; snake_case
names are accepted as well.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PatientProfile(BaseModel):
    """
    Cardiovascular risk profile of a single patient.

    Created by the caller for one recommendation request and never stored.
    `pseudonymized_id` is only used for log correlation; it is never sent to
    Gemini and never influences the generated recommendations.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pseudonymized_id: str = Field(
        ...,
        alias="pseudonymizedId",
        description="Opaque per-patient token used for log correlation only",
        min_length=1,
        examples=["PT-4F9A21"]
    )
    age: int = Field(
        ...,
        description="Age in years",
        gt=0,
        examples=[58]
    )
    sex: Literal["Male", "Female"] = Field(
        ...,
        description="Biological sex",
        examples=["Male"]
    )
    race: Literal["White", "African American", "Other"] = Field(
        ...,
        description="Race/ethnicity as used by the pooled cohort equations",
        examples=["White"]
    )
    systolic_bp: float = Field(
        ...,
        alias="systolicBP",
        description="Systolic blood pressure in mmHg",
        gt=0,
        examples=[142]
    )
    total_cholesterol: float = Field(
        ...,
        alias="totalCholesterol",
        description="Total cholesterol in mg/dL",
        gt=0,
        examples=[213]
    )
    hdl_cholesterol: float = Field(
        ...,
        alias="hdlCholesterol",
        description="HDL cholesterol in mg/dL",
        gt=0,
        examples=[50]
    )
    is_smoker: bool = Field(
        ...,
        alias="isSmoker",
        description="Current smoker"
    )
    on_htn_meds: bool = Field(
        ...,
        alias="onHTNMeds",
        description="Currently treated with antihypertensive medication"
    )
    has_diabetes: bool = Field(
        ...,
        alias="hasDiabetes",
        description="Diagnosed with diabetes"
    )
