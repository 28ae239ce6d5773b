"""Best-effort remote calls with a local fallback.

The terminology registry is advisory: when it is slow, down or answers with
garbage, callers still need an answer. ``call_with_fallback`` runs a remote
coroutine under a hard timeout and, on any failure, logs the failure class and
returns the value of a local fallback instead.

Cancellation is never treated as a failure and always propagates.
"""

from __future__ import annotations

import asyncio
import enum
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import ValidationError

from app.clinical.terminology.errors import RegistryResponseError, RegistryUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailureKind(str, enum.Enum):
    TRANSIENT = "transient"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class RemoteFailure:
    kind: FailureKind
    detail: str


@dataclass(frozen=True)
class FallbackOutcome(Generic[T]):
    value: T
    used_fallback: bool
    failure: RemoteFailure | None = None


def classify_failure(exc: BaseException) -> FailureKind:
    if isinstance(exc, (RegistryResponseError, ValidationError, json.JSONDecodeError, TypeError, KeyError)):
        return FailureKind.MALFORMED
    if isinstance(exc, (RegistryUnavailableError, httpx.HTTPError, asyncio.TimeoutError, OSError)):
        return FailureKind.TRANSIENT
    # Anything unexpected is handled like an outage.
    return FailureKind.TRANSIENT


def _describe(exc: BaseException) -> str:
    if isinstance(exc, asyncio.TimeoutError):
        return "timed out"
    return str(exc) or exc.__class__.__name__


async def call_with_fallback(
    remote: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    *,
    timeout: float,
    operation: str,
) -> FallbackOutcome[T]:
    try:
        value = await asyncio.wait_for(remote(), timeout=timeout)
    except Exception as exc:
        failure = RemoteFailure(kind=classify_failure(exc), detail=_describe(exc))
        logger.warning(
            "%s failed (%s: %s); using local fallback",
            operation,
            failure.kind.value,
            failure.detail,
        )
        return FallbackOutcome(value=fallback(), used_fallback=True, failure=failure)

    return FallbackOutcome(value=value, used_fallback=False)
