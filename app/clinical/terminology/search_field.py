"""Per-input cancellation for keystroke-driven terminology search.

Each search input owns one ``TerminologySearchField``. Starting a new search
cancels the previous in-flight one, and closing the form cancels whatever is
still running, so a slow answer for an old term never lands after the user
has moved on.

This is the entry point for interactive, keystroke-driven callers embedding
the core as a library. The HTTP search endpoint is request/response and uses
``TerminologyClient`` directly.
"""

from __future__ import annotations

import asyncio
import logging

from app.clinical.terminology.client import TerminologyClient
from app.clinical.terminology.models import TerminologyEntry

logger = logging.getLogger(__name__)


class TerminologySearchField:
    def __init__(self, client: TerminologyClient) -> None:
        self.client = client
        self._inflight: asyncio.Task[list[TerminologyEntry]] | None = None

    @property
    def in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def search(self, term: str) -> list[TerminologyEntry] | None:
        """Run a search for ``term``; returns None when it was superseded or cancelled."""
        task = asyncio.create_task(self.client.search(term))
        previous, self._inflight = self._inflight, task
        if previous is not None and not previous.done():
            logger.debug("Superseding in-flight terminology search")
            previous.cancel()

        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            if self._inflight is task and task.done():
                self._inflight = None

        if task.cancelled():
            return None
        return task.result()

    def cancel(self) -> None:
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None
