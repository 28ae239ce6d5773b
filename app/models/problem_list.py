"""SQLAlchemy model for the patient problem list.

The problem list is the system of record for dual-coded diagnoses. Each row
holds copies of the NAMASTE and ICD-11 codes/names taken at selection time, so
later changes in the terminology registry never rewrite a historical diagnosis.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Text, func, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class ProblemListEntry(Base):
    __tablename__ = "problem_list"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True, default=uuid4)
    patient_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    doctor_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    hospital_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    namaste_code: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    namaste_name: Mapped[str] = mapped_column(Text, nullable=False)
    icd_code: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    icd_name: Mapped[str] = mapped_column(Text, nullable=False)
    disease_name_hindi: Mapped[str | None] = mapped_column(Text, nullable=True)
    severity: Mapped[str] = mapped_column(String(16), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active", server_default=text("'active'"))
    treatment_approach: Mapped[str] = mapped_column(String(32), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    diagnosis_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    resolution_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
