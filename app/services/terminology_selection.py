"""Resolve a client-submitted terminology selection to an authoritative entry.

The diagnosis form sends back the whole entry the clinician picked. Its codes
and names are only trusted once they match either the bundled corpus (by id)
or a fresh registry search for the entry's NAMASTE name.
"""

from __future__ import annotations

import logging

from app.clinical.terminology.client import TerminologyClient
from app.clinical.terminology.models import TerminologyEntry

logger = logging.getLogger(__name__)


class TerminologyEntryNotFoundError(LookupError):
    pass


def _coding(entry: TerminologyEntry) -> tuple[str, ...]:
    return (entry.namaste_code, entry.namaste_name, entry.icd_code, entry.icd_name)


async def resolve_selected_entry(client: TerminologyClient, selected: TerminologyEntry) -> TerminologyEntry:
    for entry in client.corpus:
        if entry.id == selected.id:
            if _coding(entry) != _coding(selected):
                raise TerminologyEntryNotFoundError(f"{selected.id} does not match the bundled corpus entry")
            return entry

    for entry in await client.search(selected.namaste_name):
        if entry.id == selected.id and _coding(entry) == _coding(selected):
            return entry

    logger.warning("Selected terminology entry %s (%s) could not be confirmed", selected.id, selected.namaste_code)
    raise TerminologyEntryNotFoundError(f"{selected.id} ({selected.namaste_code}) not found in terminology search")
