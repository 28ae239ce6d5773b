"""Create problem_list table.

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "problem_list",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("patient_id", sa.String(length=64), nullable=False),
        sa.Column("doctor_id", sa.String(length=64), nullable=False),
        sa.Column("hospital_id", sa.String(length=64), nullable=True),
        sa.Column("namaste_code", sa.String(length=32), nullable=False),
        sa.Column("namaste_name", sa.Text(), nullable=False),
        sa.Column("icd_code", sa.String(length=32), nullable=False),
        sa.Column("icd_name", sa.Text(), nullable=False),
        sa.Column("disease_name_hindi", sa.Text(), nullable=True),
        sa.Column("severity", sa.String(length=16), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default=sa.text("'active'")),
        sa.Column("treatment_approach", sa.String(length=32), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("diagnosis_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("resolution_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "severity IN ('mild', 'moderate', 'severe', 'critical')",
            name="ck_problem_list_severity",
        ),
        sa.CheckConstraint(
            "status IN ('active', 'inactive', 'resolved')",
            name="ck_problem_list_status",
        ),
    )
    for column in ("patient_id", "doctor_id", "hospital_id", "namaste_code", "icd_code"):
        op.create_index(op.f(f"ix_problem_list_{column}"), "problem_list", [column], unique=False)


def downgrade() -> None:
    for column in ("icd_code", "namaste_code", "hospital_id", "doctor_id", "patient_id"):
        op.drop_index(op.f(f"ix_problem_list_{column}"), table_name="problem_list")
    op.drop_table("problem_list")
