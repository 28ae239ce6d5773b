"""Tests for the fallback corpus substring matcher."""

import pytest

from app.clinical.terminology.models import TerminologyEntry
from app.data.fallback_corpus import FALLBACK_CORPUS
from app.services.fuzzy_matcher import entry_matches, match


def _codes(entries):
    return [e.namaste_code for e in entries]


class TestMatch:
    def test_diabetes_matches_madhumeha_via_synonym(self):
        results = match("diabetes", FALLBACK_CORPUS)

        assert [e.namaste_name for e in results] == ["Madhumeha (Diabetes Mellitus)"]

    def test_matching_is_case_insensitive(self):
        assert _codes(match("ASTHMA", FALLBACK_CORPUS)) == ["NAM007"]
        assert _codes(match("pYrExIa", FALLBACK_CORPUS)) == ["NAM002"]

    def test_matches_icd_name(self):
        assert _codes(match("without complications", FALLBACK_CORPUS)) == ["NAM001"]

    def test_corpus_order_is_preserved(self):
        assert _codes(match("high", FALLBACK_CORPUS)) == ["NAM001", "NAM005"]
        assert _codes(match("disease", FALLBACK_CORPUS)) == ["NAM004"]

    def test_hindi_name_matches_exact_substring(self):
        assert _codes(match("ज्वर", FALLBACK_CORPUS)) == ["NAM002"]
        assert _codes(match("रक्तचाप", FALLBACK_CORPUS)) == ["NAM005"]

    def test_description_is_not_searched(self):
        assert match("metabolic disorder", FALLBACK_CORPUS) == []

    def test_no_match_returns_empty_list(self):
        assert match("ji", FALLBACK_CORPUS) == []
        assert match("zzzz", FALLBACK_CORPUS) == []

    def test_empty_corpus(self):
        assert match("fever", []) == []

    def test_is_deterministic(self):
        first = match("a", FALLBACK_CORPUS)
        for _ in range(5):
            assert match("a", FALLBACK_CORPUS) == first

    @pytest.mark.parametrize("entry", FALLBACK_CORPUS, ids=lambda e: e.namaste_code)
    def test_every_entry_found_by_its_own_name(self, entry):
        assert entry in match(entry.namaste_name, FALLBACK_CORPUS)


class TestEntryMatches:
    def test_entry_without_hindi_name(self):
        entry = TerminologyEntry(
            id="x",
            namaste_code="NAMX",
            namaste_name="Shirashoola (Headache)",
            icd_code="8A8Z",
            icd_name="Headache disorders, unspecified",
            disease_name_hindi=None,
        )

        assert entry_matches("headache", entry)
        assert not entry_matches("सिर", entry)
