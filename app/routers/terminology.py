"""Terminology search router.

GET /terminology/search?term=... answers from the external registry when it is
reachable and from the bundled fallback corpus otherwise. Registry failures are
never reported to the caller as errors.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request

from app.clinical.terminology.client import TerminologyClient
from app.clinical.terminology.models import TerminologySearchResult
from app.core.identity import SessionContext, get_session_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/terminology", tags=["terminology"])

MAX_TERM_LENGTH = 200


def get_terminology_client(request: Request) -> TerminologyClient:
    return request.app.state.terminology_client


@router.get("/search", response_model=TerminologySearchResult)
async def search_terminology(
    term: str = Query(default="", description="Disease name in English or Hindi"),
    client: TerminologyClient = Depends(get_terminology_client),
    context: SessionContext = Depends(get_session_context),
) -> TerminologySearchResult:
    result = await client.search_with_source(term[:MAX_TERM_LENGTH])
    logger.info(
        "terminology search user=%s term=%r source=%s results=%s",
        context.principal.id,
        result.term,
        result.source,
        len(result.results),
    )
    return result
