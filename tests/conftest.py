"""Shared fixtures for the dual-coding core tests."""

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from app.clinical.terminology.client import TerminologyClient
from app.clinical.terminology.models import TerminologyEntry
from app.core.config import Settings
from app.data.fallback_corpus import FALLBACK_CORPUS

REGISTRY_HOST = "https://registry.test"
REGISTRY_KEY = "test-key"


@pytest.fixture
def registry_settings() -> Settings:
    return Settings(
        terminology_api_host=REGISTRY_HOST,
        terminology_api_key=REGISTRY_KEY,
        terminology_timeout_seconds=5.0,
    )


@pytest.fixture
def offline_settings() -> Settings:
    return Settings(terminology_api_host=None, terminology_api_key=None)


@pytest.fixture
def make_client(registry_settings: Settings) -> Callable[..., TerminologyClient]:
    """Build a TerminologyClient whose HTTP traffic goes to ``handler``."""

    def _make(handler, settings: Settings | None = None) -> TerminologyClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return TerminologyClient(settings or registry_settings, http_client=http_client)

    return _make


@pytest.fixture
def madhumeha() -> TerminologyEntry:
    return FALLBACK_CORPUS[0]


@pytest.fixture
def amavata() -> TerminologyEntry:
    return FALLBACK_CORPUS[2]


@pytest.fixture
def mock_db_session() -> MagicMock:
    """Mock AsyncSession usable in place of a real database."""
    session = MagicMock()
    session.add = MagicMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.execute = AsyncMock()
    return session
