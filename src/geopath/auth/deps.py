"""
geopath.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer token into a typed `Principal`.
- Bind the caller's subject as `owner_id` into the request's log context.
"""

from __future__ import annotations

import structlog
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from geopath.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from geopath.auth.models import Principal
from geopath.api.deps import settings_dep
from geopath.settings import Settings

_bearer = HTTPBearer(auto_error=False)


async def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> Principal:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Missing bearer token")

    try:
        payload = decode_and_validate(
            cfg=JwtConfig.from_settings(settings), token=creds.credentials
        )
    except JwtValidationError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}") from e

    subject = str(payload.get("sub", ""))
    if not subject:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token subject")

    structlog.contextvars.bind_contextvars(owner_id=subject)
    return Principal(subject=subject)
