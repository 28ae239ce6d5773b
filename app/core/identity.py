"""Identity resolution and the explicit per-request session context.

Callers identify themselves with their ABHA id in the ``X-ABHA-ID`` header.
An ``IdentityResolver`` turns that external id into an internal ``Principal``;
the bundled ``StaticIdentityResolver`` holds the demo accounts and is meant to
be swapped for a real identity-provider integration.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from fastapi import Depends, Header, HTTPException, Request, status


class Role(str, enum.Enum):
    DOCTOR = "doctor"
    ADMIN = "admin"
    GOVERNMENT = "government"


@dataclass(frozen=True)
class Principal:
    id: str
    abha_id: str
    name: str
    role: Role
    hospital_id: str | None = None


@dataclass(frozen=True)
class SessionContext:
    principal: Principal

    def has_role(self, *roles: Role) -> bool:
        return self.principal.role in roles


class IdentityResolver(Protocol):
    def resolve(self, external_id: str) -> Principal | None: ...


class StaticIdentityResolver:
    def __init__(self, principals: Iterable[Principal]) -> None:
        self._by_abha_id = {p.abha_id: p for p in principals}

    def resolve(self, external_id: str) -> Principal | None:
        return self._by_abha_id.get((external_id or "").strip())


DEMO_PRINCIPALS: tuple[Principal, ...] = (
    Principal(
        id="610e8400-e29b-41d4-a716-446655440001",
        abha_id="ABHA123456789012",
        name="Dr. Rajesh Kumar",
        role=Role.DOCTOR,
        hospital_id="550e8400-e29b-41d4-a716-446655440001",
    ),
    Principal(
        id="610e8400-e29b-41d4-a716-446655440006",
        abha_id="ABHA223456789012",
        name="Ravi Krishnan",
        role=Role.ADMIN,
        hospital_id="550e8400-e29b-41d4-a716-446655440001",
    ),
    Principal(
        id="610e8400-e29b-41d4-a716-446655440008",
        abha_id="ABHA323456789012",
        name="Dr. Suresh Chand",
        role=Role.GOVERNMENT,
    ),
)


def get_identity_resolver(request: Request) -> IdentityResolver:
    return request.app.state.identity_resolver


def get_session_context(
    x_abha_id: str | None = Header(default=None),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> SessionContext:
    if not x_abha_id or not x_abha_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="X-ABHA-ID header is required")

    principal = resolver.resolve(x_abha_id)
    if principal is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid ABHA ID or user not found")

    return SessionContext(principal=principal)


def require_role(*roles: Role) -> Callable[..., SessionContext]:
    def _dependency(context: SessionContext = Depends(get_session_context)) -> SessionContext:
        if not context.has_role(*roles):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="insufficient role for this operation")
        return context

    return _dependency
