"""Substring matcher over the local terminology corpus.

Used when the remote registry cannot answer. The corpus is small and curated,
so there is no scoring: corpus order is the result order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from app.clinical.terminology.models import TerminologyEntry


def _folded_fields(entry: TerminologyEntry) -> Iterable[str]:
    yield entry.namaste_name
    yield entry.icd_name
    yield from entry.synonyms


def entry_matches(term: str, entry: TerminologyEntry) -> bool:
    needle = term.lower()
    if any(needle in value.lower() for value in _folded_fields(entry)):
        return True
    # Vernacular names are compared as typed, without case folding.
    return bool(entry.disease_name_hindi) and term in entry.disease_name_hindi


def match(term: str, corpus: Sequence[TerminologyEntry]) -> list[TerminologyEntry]:
    return [entry for entry in corpus if entry_matches(term, entry)]
