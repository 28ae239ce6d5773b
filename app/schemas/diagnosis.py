from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.clinical.terminology.models import TerminologyEntry
from app.services.diagnosis_builder import Severity
from app.services.diagnosis_commit_service import CommitStatus


class DiagnosisCreateRequest(BaseModel):
    patient_id: str = Field(..., min_length=1, max_length=64)
    hospital_id: str | None = Field(default=None, max_length=64)
    selected_entry: TerminologyEntry | None = None
    # The form pre-selects "moderate"; the builder itself never defaults severity.
    severity: Severity = Severity.MODERATE
    treatment_approach: str | None = Field(default=None, max_length=32)
    notes: str | None = None

    @field_validator("patient_id", mode="before")
    @classmethod
    def _strip_patient_id(cls, value: object) -> str:
        if value is None:
            raise ValueError("patient_id is required")
        cleaned = str(value).strip()
        if not cleaned:
            raise ValueError("patient_id must not be empty")
        return cleaned

    @field_validator("hospital_id", "treatment_approach", mode="before")
    @classmethod
    def _strip_optional(cls, value: object) -> str | None:
        if value is None:
            return None
        cleaned = str(value).strip()
        return cleaned or None

    @field_validator("severity", mode="before")
    @classmethod
    def _lower_severity(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class DiagnosisCommitResponse(BaseModel):
    status: CommitStatus
    entry_id: UUID | None = None
    message: str
    mirrored: bool


class ProblemListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    patient_id: str
    doctor_id: str
    hospital_id: str | None
    namaste_code: str
    namaste_name: str
    icd_code: str
    icd_name: str
    disease_name_hindi: str | None
    severity: str
    status: str
    treatment_approach: str
    notes: str | None
    diagnosis_date: datetime
    resolution_date: datetime | None
