"""Assembly and validation of dual-coded diagnosis records.

A ``DiagnosisRecord`` always starts from a selected ``TerminologyEntry``: the
NAMASTE and ICD-11 codes and names are copied from that entry when the record
is built and are never accepted as free text. Validation happens here, before
anything is written to the primary store or the registry.

Severity has no default at this level. The HTTP layer may pre-fill
``moderate`` for the form, but a record is only built from an explicit value.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from app.clinical.terminology.models import TerminologyEntry


class Severity(str, enum.Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_ORDER = (Severity.MILD, Severity.MODERATE, Severity.SEVERE, Severity.CRITICAL)


class DiagnosisValidationReason(str, enum.Enum):
    NO_ENTRY_SELECTED = "no_entry_selected"
    APPROACH_NOT_ALLOWED = "approach_not_allowed"
    INVALID_SEVERITY = "invalid_severity"
    MISSING_REFERENCE = "missing_reference"


class DiagnosisValidationError(ValueError):
    def __init__(self, reason: DiagnosisValidationReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class DiagnosisRecord:
    patient_id: str
    doctor_id: str
    hospital_id: str | None
    namaste_code: str
    namaste_name: str
    icd_code: str
    icd_name: str
    disease_name_hindi: str | None
    severity: Severity
    treatment_approach: str
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_registry_payload(self) -> dict[str, Any]:
        return {
            "patient_id": self.patient_id,
            "doctor_id": self.doctor_id,
            "hospital_id": self.hospital_id or "",
            "namaste_code": self.namaste_code,
            "namaste_name": self.namaste_name,
            "icd_code": self.icd_code,
            "icd_name": self.icd_name,
            "disease_name_hindi": self.disease_name_hindi or "",
            "severity": self.severity.value,
            "treatment_approach": self.treatment_approach,
            "notes": self.notes or "",
        }


def _coerce_severity(value: Severity | str | None) -> Severity:
    if isinstance(value, Severity):
        return value
    if value is None:
        raise DiagnosisValidationError(DiagnosisValidationReason.INVALID_SEVERITY, "severity is required")
    try:
        return Severity(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in Severity)
        raise DiagnosisValidationError(
            DiagnosisValidationReason.INVALID_SEVERITY,
            f"severity must be one of: {allowed}",
        ) from None


def _require_reference(name: str, value: str | None) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise DiagnosisValidationError(DiagnosisValidationReason.MISSING_REFERENCE, f"{name} is required")
    return cleaned


def build_diagnosis(
    *,
    patient_id: str,
    doctor_id: str,
    hospital_id: str | None,
    selected_entry: TerminologyEntry | None,
    severity: Severity | str | None,
    treatment_approach: str | None = None,
    notes: str | None = None,
    created_at: datetime | None = None,
) -> DiagnosisRecord:
    if selected_entry is None:
        raise DiagnosisValidationError(
            DiagnosisValidationReason.NO_ENTRY_SELECTED,
            "a terminology entry must be selected before saving a diagnosis",
        )

    patient_ref = _require_reference("patient_id", patient_id)
    doctor_ref = _require_reference("doctor_id", doctor_id)
    resolved_severity = _coerce_severity(severity)

    if treatment_approach is None:
        approach = selected_entry.default_treatment_approach
    elif selected_entry.allows_treatment_approach(treatment_approach):
        approach = treatment_approach
    else:
        allowed = ", ".join(selected_entry.treatment_approach)
        raise DiagnosisValidationError(
            DiagnosisValidationReason.APPROACH_NOT_ALLOWED,
            f"treatment approach {treatment_approach!r} is not allowed for "
            f"{selected_entry.namaste_code} (allowed: {allowed})",
        )

    cleaned_notes = (notes or "").strip() or None

    return DiagnosisRecord(
        patient_id=patient_ref,
        doctor_id=doctor_ref,
        hospital_id=(hospital_id or "").strip() or None,
        namaste_code=selected_entry.namaste_code,
        namaste_name=selected_entry.namaste_name,
        icd_code=selected_entry.icd_code,
        icd_name=selected_entry.icd_name,
        disease_name_hindi=selected_entry.disease_name_hindi,
        severity=resolved_severity,
        treatment_approach=approach,
        notes=cleaned_notes,
        created_at=created_at or datetime.now(timezone.utc),
    )
