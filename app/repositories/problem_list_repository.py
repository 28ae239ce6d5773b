from __future__ import annotations

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.problem_list import ProblemListEntry
from app.services.diagnosis_builder import DiagnosisRecord

logger = logging.getLogger(__name__)


class PrimaryStoreError(RuntimeError):
    pass


class ProblemListRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def insert_diagnosis(self, record: DiagnosisRecord) -> UUID:
        row = ProblemListEntry(
            id=uuid4(),
            patient_id=record.patient_id,
            doctor_id=record.doctor_id,
            hospital_id=record.hospital_id,
            namaste_code=record.namaste_code,
            namaste_name=record.namaste_name,
            icd_code=record.icd_code,
            icd_name=record.icd_name,
            disease_name_hindi=record.disease_name_hindi,
            severity=record.severity.value,
            status="active",
            treatment_approach=record.treatment_approach,
            notes=record.notes,
            diagnosis_date=record.created_at,
        )
        try:
            self.db.add(row)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.exception("Failed to insert problem_list entry for patient %s", record.patient_id)
            raise PrimaryStoreError("failed to save diagnosis to the problem list") from exc
        return row.id

    async def list_for_patient(self, patient_id: str) -> list[ProblemListEntry]:
        stmt = (
            select(ProblemListEntry)
            .where(ProblemListEntry.patient_id == patient_id)
            .order_by(ProblemListEntry.diagnosis_date.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
