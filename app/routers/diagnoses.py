"""Diagnosis router: build, commit and list dual-coded diagnoses."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.clinical.terminology.client import TerminologyClient
from app.core.identity import Role, SessionContext, require_role
from app.db.async_session import get_async_db
from app.repositories.problem_list_repository import ProblemListRepository
from app.routers.terminology import get_terminology_client
from app.schemas.diagnosis import DiagnosisCommitResponse, DiagnosisCreateRequest, ProblemListItem
from app.services.diagnosis_builder import DiagnosisValidationError, build_diagnosis
from app.services.diagnosis_commit_service import CommitStatus, DiagnosisCommitService
from app.services.terminology_selection import TerminologyEntryNotFoundError, resolve_selected_entry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["diagnoses"])


@router.post("/diagnoses", response_model=DiagnosisCommitResponse, status_code=status.HTTP_201_CREATED)
async def create_diagnosis(
    payload: DiagnosisCreateRequest,
    context: SessionContext = Depends(require_role(Role.DOCTOR)),
    db: AsyncSession = Depends(get_async_db),
    registry: TerminologyClient = Depends(get_terminology_client),
) -> DiagnosisCommitResponse:
    principal = context.principal
    selected_entry = payload.selected_entry
    if selected_entry is not None:
        try:
            selected_entry = await resolve_selected_entry(registry, selected_entry)
        except TerminologyEntryNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={"reason": "unknown_entry", "message": str(exc)},
            ) from exc

    try:
        record = build_diagnosis(
            patient_id=payload.patient_id,
            doctor_id=principal.id,
            hospital_id=principal.hospital_id or payload.hospital_id,
            selected_entry=selected_entry,
            severity=payload.severity,
            treatment_approach=payload.treatment_approach,
            notes=payload.notes,
        )
    except DiagnosisValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"reason": exc.reason.value, "message": str(exc)},
        ) from exc

    service = DiagnosisCommitService(store=ProblemListRepository(db), registry=registry)
    result = await service.commit(record)

    if result.status is CommitStatus.REJECTED:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result.reason)

    message = "Diagnosis saved" if result.mirrored else "Diagnosis saved; registry mirror unavailable"
    return DiagnosisCommitResponse(
        status=result.status,
        entry_id=result.entry_id,
        message=message,
        mirrored=result.mirrored,
    )


@router.get("/patients/{patient_id}/problems", response_model=List[ProblemListItem])
async def list_patient_problems(
    patient_id: str,
    context: SessionContext = Depends(require_role(Role.DOCTOR, Role.ADMIN)),
    db: AsyncSession = Depends(get_async_db),
) -> List[ProblemListItem]:
    try:
        rows = await ProblemListRepository(db).list_for_patient(patient_id.strip())
    except SQLAlchemyError as exc:
        logger.exception("Failed to load problem list for patient %s", patient_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="failed to load problem list") from exc

    return [ProblemListItem.model_validate(row) for row in rows]
