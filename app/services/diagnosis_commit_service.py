"""Dual write of a diagnosis: primary store first, registry mirror second.

The problem list is the system of record. A diagnosis is committed once the
primary store accepts it; the terminology registry only receives a mirror copy
afterwards, and a mirror failure never undoes or blocks the primary write.

Results:
- ``COMMITTED``               both writes succeeded
- ``COMMITTED_PRIMARY_ONLY``  primary write succeeded, mirror did not
- ``REJECTED``                primary write failed, no mirror was attempted
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from app.clinical.terminology.models import RegistrySubmitResult
from app.services.diagnosis_builder import DiagnosisRecord

logger = logging.getLogger(__name__)

RETRY_MESSAGE = "Failed to save diagnosis. Please try again."


class DiagnosisStore(Protocol):
    async def insert_diagnosis(self, record: DiagnosisRecord) -> Any: ...


class DiagnosisRegistry(Protocol):
    async def submit(self, record: DiagnosisRecord) -> RegistrySubmitResult: ...


class CommitStatus(str, enum.Enum):
    COMMITTED = "committed"
    COMMITTED_PRIMARY_ONLY = "committed_primary_only"
    REJECTED = "rejected"


@dataclass(frozen=True)
class CommitResult:
    status: CommitStatus
    entry_id: Any = None
    reason: str | None = None
    mirror_message: str | None = None

    @property
    def is_committed(self) -> bool:
        return self.status is not CommitStatus.REJECTED

    @property
    def mirrored(self) -> bool:
        return self.status is CommitStatus.COMMITTED


class DiagnosisCommitService:
    def __init__(self, store: DiagnosisStore, registry: DiagnosisRegistry) -> None:
        self.store = store
        self.registry = registry

    async def commit(self, record: DiagnosisRecord) -> CommitResult:
        try:
            entry_id = await self.store.insert_diagnosis(record)
        except Exception:
            logger.exception("Primary store rejected diagnosis for patient %s", record.patient_id)
            return CommitResult(status=CommitStatus.REJECTED, reason=RETRY_MESSAGE)

        try:
            mirror = await self.registry.submit(record)
        except Exception as exc:
            logger.warning("Registry mirror failed for problem_list entry %s: %s", entry_id, exc)
            return CommitResult(
                status=CommitStatus.COMMITTED_PRIMARY_ONLY,
                entry_id=entry_id,
                mirror_message=str(exc) or exc.__class__.__name__,
            )

        if mirror.offline or not mirror.accepted:
            logger.warning(
                "Registry did not mirror problem_list entry %s (accepted=%s offline=%s): %s",
                entry_id,
                mirror.accepted,
                mirror.offline,
                mirror.message,
            )
            return CommitResult(
                status=CommitStatus.COMMITTED_PRIMARY_ONLY,
                entry_id=entry_id,
                mirror_message=mirror.message,
            )

        return CommitResult(status=CommitStatus.COMMITTED, entry_id=entry_id, mirror_message=mirror.message)
