"""Tests for identity resolution and role gating."""

import pytest
from fastapi import HTTPException

from app.core.identity import (
    DEMO_PRINCIPALS,
    Role,
    SessionContext,
    StaticIdentityResolver,
    get_session_context,
    require_role,
)


@pytest.fixture
def resolver():
    return StaticIdentityResolver(DEMO_PRINCIPALS)


def test_resolves_known_abha_id(resolver):
    principal = resolver.resolve(" ABHA123456789012 ")

    assert principal.name == "Dr. Rajesh Kumar"
    assert principal.role is Role.DOCTOR


def test_unknown_abha_id(resolver):
    assert resolver.resolve("ABHA000000000000") is None
    assert resolver.resolve("") is None


def test_session_context_requires_header(resolver):
    with pytest.raises(HTTPException) as exc_info:
        get_session_context(x_abha_id=None, resolver=resolver)

    assert exc_info.value.status_code == 401


def test_session_context_wraps_principal(resolver):
    context = get_session_context(x_abha_id="ABHA323456789012", resolver=resolver)

    assert context.principal.role is Role.GOVERNMENT
    assert context.principal.hospital_id is None


def test_require_role():
    doctor = SessionContext(principal=DEMO_PRINCIPALS[0])
    admin = SessionContext(principal=DEMO_PRINCIPALS[1])
    gate = require_role(Role.DOCTOR)

    assert gate(context=doctor) is doctor
    with pytest.raises(HTTPException) as exc_info:
        gate(context=admin)
    assert exc_info.value.status_code == 403
