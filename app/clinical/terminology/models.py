"""Terminology reference records for dual coding (NAMASTE + ICD-11).

Entries are read-only: they come either from the external terminology
registry or from the bundled fallback corpus and are never mutated.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TREATMENT_APPROACH = "allopathic"


class TerminologyEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    namaste_code: str = Field(..., min_length=1)
    namaste_name: str = Field(..., min_length=1)
    icd_code: str = Field(..., min_length=1)
    icd_name: str = Field(..., min_length=1)
    disease_name_hindi: str | None = None
    category: str = ""
    description: str | None = None
    synonyms: tuple[str, ...] = ()
    treatment_approach: tuple[str, ...] = (DEFAULT_TREATMENT_APPROACH,)

    @field_validator("synonyms", mode="before")
    @classmethod
    def _coerce_synonyms(cls, value: object) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("synonyms must be a list of strings")
        return tuple(str(item).strip() for item in value if str(item).strip())

    @field_validator("treatment_approach", mode="before")
    @classmethod
    def _default_treatment_approach(cls, value: object) -> tuple[str, ...]:
        if value is None:
            return (DEFAULT_TREATMENT_APPROACH,)
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("treatment_approach must be a list of strings")
        approaches = tuple(str(item).strip() for item in value if str(item).strip())
        return approaches or (DEFAULT_TREATMENT_APPROACH,)

    @property
    def default_treatment_approach(self) -> str:
        return self.treatment_approach[0]

    def allows_treatment_approach(self, approach: str) -> bool:
        return approach in self.treatment_approach


class TerminologySearchResult(BaseModel):
    """Search results together with the path that produced them."""

    model_config = ConfigDict(frozen=True)

    term: str
    source: str
    results: list[TerminologyEntry]


class RegistrySubmitResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    accepted: bool
    message: str = ""
    offline: bool = False
