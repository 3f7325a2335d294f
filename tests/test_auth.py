"""
tests.test_auth

Bearer token handling: identity only, and the caller bound into log context.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from geopath.auth.deps import get_principal
from geopath.auth.jwt import JwtConfig, decode_and_validate, issue_token
from geopath.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test")


@pytest.fixture(autouse=True)
def _clean_log_context() -> Iterator[None]:
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


def _creds(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_issued_token_carries_identity_claims_only(settings: Settings) -> None:
    cfg = JwtConfig.from_settings(settings)
    payload = decode_and_validate(cfg=cfg, token=issue_token(cfg=cfg, subject="alice"))

    assert payload["sub"] == "alice"
    assert "roles" not in payload


@pytest.mark.asyncio
async def test_principal_binds_owner_into_log_context(settings: Settings) -> None:
    token = issue_token(cfg=JwtConfig.from_settings(settings), subject="alice")

    principal = await get_principal(creds=_creds(token), settings=settings)

    assert principal.subject == "alice"
    assert structlog.contextvars.get_contextvars()["owner_id"] == "alice"


@pytest.mark.asyncio
async def test_invalid_token_is_rejected(settings: Settings) -> None:
    with pytest.raises(HTTPException) as exc_info:
        await get_principal(creds=_creds("not-a-jwt"), settings=settings)

    assert exc_info.value.status_code == 401
    assert structlog.contextvars.get_contextvars() == {}
