"""Tests for diagnosis record assembly and validation."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from app.clinical.terminology.models import TerminologyEntry
from app.services.diagnosis_builder import (
    DiagnosisValidationError,
    DiagnosisValidationReason,
    Severity,
    build_diagnosis,
)


def _build(entry, **overrides):
    kwargs = dict(
        patient_id="patient-1",
        doctor_id="doctor-1",
        hospital_id="hospital-1",
        selected_entry=entry,
        severity=Severity.MODERATE,
    )
    kwargs.update(overrides)
    return build_diagnosis(**kwargs)


class TestSelection:
    def test_requires_selected_entry(self):
        with pytest.raises(DiagnosisValidationError) as exc_info:
            _build(None)

        assert exc_info.value.reason is DiagnosisValidationReason.NO_ENTRY_SELECTED

    def test_copies_codes_and_names(self, madhumeha):
        record = _build(madhumeha)

        assert record.namaste_code == "NAM001"
        assert record.namaste_name == "Madhumeha (Diabetes Mellitus)"
        assert record.icd_code == "E11.9"
        assert record.icd_name == "Type 2 diabetes mellitus without complications"
        assert record.disease_name_hindi == "मधुमेह"

    def test_record_is_independent_of_later_entry_versions(self, madhumeha):
        record = _build(madhumeha)
        revised = madhumeha.model_copy(update={"icd_name": "Type 2 diabetes mellitus, revised"})

        assert revised.icd_name != record.icd_name
        assert record.icd_name == "Type 2 diabetes mellitus without complications"

    def test_record_is_immutable(self, madhumeha):
        record = _build(madhumeha)

        with pytest.raises(FrozenInstanceError):
            record.icd_code = "X00"


class TestTreatmentApproach:
    def test_defaults_to_first_allowed_approach(self, amavata):
        assert _build(amavata).treatment_approach == "allopathic"

    def test_accepts_allowed_approach(self, amavata):
        assert _build(amavata, treatment_approach="ayurvedic").treatment_approach == "ayurvedic"

    def test_rejects_approach_not_allowed(self, amavata):
        assert amavata.treatment_approach == ("allopathic", "ayurvedic")

        with pytest.raises(DiagnosisValidationError) as exc_info:
            _build(amavata, treatment_approach="unani")

        assert exc_info.value.reason is DiagnosisValidationReason.APPROACH_NOT_ALLOWED
        assert "unani" in str(exc_info.value)

    @pytest.mark.parametrize("approach", ["allopathic", "ayurvedic", "unani", "siddha", "mixed", "Ayurvedic"])
    def test_fails_iff_approach_not_in_entry(self, amavata, approach):
        allowed = approach in amavata.treatment_approach
        if allowed:
            assert _build(amavata, treatment_approach=approach).treatment_approach == approach
        else:
            with pytest.raises(DiagnosisValidationError) as exc_info:
                _build(amavata, treatment_approach=approach)
            assert exc_info.value.reason is DiagnosisValidationReason.APPROACH_NOT_ALLOWED

    def test_entry_without_approaches_uses_default(self):
        entry = TerminologyEntry(
            id="x",
            namaste_code="NAMX",
            namaste_name="Pandu (Anaemia)",
            icd_code="3A9Z",
            icd_name="Anaemia, unspecified",
            treatment_approach=[],
        )

        assert _build(entry).treatment_approach == "allopathic"


class TestSeverity:
    def test_requires_explicit_severity(self, madhumeha):
        with pytest.raises(DiagnosisValidationError) as exc_info:
            _build(madhumeha, severity=None)

        assert exc_info.value.reason is DiagnosisValidationReason.INVALID_SEVERITY

    def test_rejects_unknown_severity(self, madhumeha):
        with pytest.raises(DiagnosisValidationError) as exc_info:
            _build(madhumeha, severity="terminal")

        assert exc_info.value.reason is DiagnosisValidationReason.INVALID_SEVERITY

    def test_accepts_severity_strings(self, madhumeha):
        assert _build(madhumeha, severity=" Critical ").severity is Severity.CRITICAL

    def test_severity_order(self):
        assert Severity.MILD < Severity.MODERATE < Severity.SEVERE < Severity.CRITICAL
        assert sorted([Severity.CRITICAL, Severity.MILD, Severity.SEVERE]) == [
            Severity.MILD,
            Severity.SEVERE,
            Severity.CRITICAL,
        ]
        assert Severity.SEVERE.rank == 2


class TestReferencesAndNotes:
    @pytest.mark.parametrize("field", ["patient_id", "doctor_id"])
    def test_blank_references_are_rejected(self, madhumeha, field):
        with pytest.raises(DiagnosisValidationError) as exc_info:
            _build(madhumeha, **{field: "   "})

        assert exc_info.value.reason is DiagnosisValidationReason.MISSING_REFERENCE

    def test_hospital_is_optional(self, madhumeha):
        assert _build(madhumeha, hospital_id=None).hospital_id is None
        assert _build(madhumeha, hospital_id="  ").hospital_id is None

    def test_notes_are_stripped(self, madhumeha):
        assert _build(madhumeha, notes="  fasting glucose 180  ").notes == "fasting glucose 180"
        assert _build(madhumeha, notes="   ").notes is None

    def test_created_at(self, madhumeha):
        fixed = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        assert _build(madhumeha, created_at=fixed).created_at == fixed
        assert _build(madhumeha).created_at.tzinfo is not None

    def test_registry_payload_uses_empty_strings_for_missing_values(self, madhumeha):
        payload = _build(madhumeha, hospital_id=None).to_registry_payload()

        assert payload["hospital_id"] == ""
        assert payload["notes"] == ""
        assert payload["severity"] == "moderate"
