"""Client for the external NAMASTE / ICD-11 terminology registry.

Endpoints used:
- GET  {host}/api/search?term=...  -> JSON array of terminology entries
- POST {host}/api/diagnosis        -> {"accepted": bool, "message": str}

The registry is never authoritative. Search falls back to the bundled corpus
and submit soft-accepts in offline mode whenever the registry cannot be used,
so neither operation raises because the registry is unavailable.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from app.clinical.terminology.errors import RegistryResponseError, RegistryUnavailableError
from app.clinical.terminology.models import RegistrySubmitResult, TerminologyEntry, TerminologySearchResult
from app.core.config import Settings
from app.data.fallback_corpus import FALLBACK_CORPUS
from app.services.fuzzy_matcher import match
from app.services.remote_fallback import call_with_fallback

if TYPE_CHECKING:
    from app.services.diagnosis_builder import DiagnosisRecord

logger = logging.getLogger(__name__)

SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"
SOURCE_NONE = "none"

OFFLINE_ACCEPT_MESSAGE = "Diagnosis saved successfully (offline mode)"

_ENTRY_LIST = TypeAdapter(list[TerminologyEntry])


class _SubmitResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    accepted: bool = Field(validation_alias=AliasChoices("accepted", "success"))
    message: str = ""


class TerminologyClient:
    def __init__(
        self,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
        corpus: Sequence[TerminologyEntry] = FALLBACK_CORPUS,
    ) -> None:
        self.timeout = settings.terminology_timeout_seconds
        self.min_query_length = settings.terminology_min_query_length
        self.corpus = tuple(corpus)
        self.base_url = (settings.terminology_api_host or "").strip().rstrip("/")
        self.is_configured = settings.terminology_registry_configured
        self._headers = {
            settings.terminology_api_key_header: (settings.terminology_api_key or "").strip(),
            settings.terminology_bypass_warning_header: "true",
            "Content-Type": "application/json",
        }
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))

        if not self.is_configured:
            logger.warning("Terminology registry host or API key not configured; running in fallback-only mode")

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def search(self, term: str) -> list[TerminologyEntry]:
        result = await self.search_with_source(term)
        return result.results

    async def search_with_source(self, term: str) -> TerminologySearchResult:
        query = (term or "").strip()
        if len(query) < self.min_query_length:
            return TerminologySearchResult(term=query, source=SOURCE_NONE, results=[])

        if not self.is_configured:
            return TerminologySearchResult(term=query, source=SOURCE_FALLBACK, results=match(query, self.corpus))

        outcome = await call_with_fallback(
            lambda: self._remote_search(query),
            lambda: match(query, self.corpus),
            timeout=self.timeout,
            operation="Terminology registry search",
        )
        source = SOURCE_FALLBACK if outcome.used_fallback else SOURCE_REMOTE
        return TerminologySearchResult(term=query, source=source, results=outcome.value)

    async def submit(self, record: DiagnosisRecord) -> RegistrySubmitResult:
        if not self.is_configured:
            return self._offline_accept()

        outcome = await call_with_fallback(
            lambda: self._remote_submit(record.to_registry_payload()),
            self._offline_accept,
            timeout=self.timeout,
            operation="Terminology registry diagnosis submit",
        )
        return outcome.value

    @staticmethod
    def _offline_accept() -> RegistrySubmitResult:
        return RegistrySubmitResult(accepted=True, message=OFFLINE_ACCEPT_MESSAGE, offline=True)

    async def _remote_search(self, query: str) -> list[TerminologyEntry]:
        response = await self._request("GET", "/api/search", params={"term": query})
        body = self._decode(response)
        if not isinstance(body, list):
            raise RegistryResponseError("search response is not a JSON array")
        try:
            return _ENTRY_LIST.validate_python(body)
        except ValidationError as exc:
            raise RegistryResponseError(f"search response has invalid entries: {exc.error_count()} error(s)") from exc

    async def _remote_submit(self, payload: dict[str, Any]) -> RegistrySubmitResult:
        response = await self._request("POST", "/api/diagnosis", json=payload)
        body = self._decode(response)
        try:
            parsed = _SubmitResponse.model_validate(body)
        except ValidationError as exc:
            raise RegistryResponseError("diagnosis response is missing the accepted flag") from exc
        return RegistrySubmitResult(accepted=parsed.accepted, message=parsed.message)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, f"{self.base_url}{path}", headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            raise RegistryUnavailableError(f"{method} {path}: {exc.__class__.__name__}") from exc

        if not response.is_success:
            raise RegistryUnavailableError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RegistryResponseError("registry response is not valid JSON") from exc
