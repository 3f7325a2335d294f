"""
geopath.api.errors

Maps the domain error taxonomy onto HTTP responses.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from geopath.domain.errors import (
    AccessDeniedError,
    GeoPathError,
    NotFoundError,
    PathNotFoundError,
    PersistenceError,
    ValidationError,
)
from geopath.observability.logging import get_logger

log = get_logger(__name__)

STATUS_BY_ERROR: dict[type[GeoPathError], int] = {
    ValidationError: HTTP_400_BAD_REQUEST,
    PathNotFoundError: HTTP_404_NOT_FOUND,
    NotFoundError: HTTP_404_NOT_FOUND,
    AccessDeniedError: HTTP_403_FORBIDDEN,
    PersistenceError: HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(error: GeoPathError) -> int:
    for err_type, status in STATUS_BY_ERROR.items():
        if isinstance(error, err_type):
            return status
    return HTTP_500_INTERNAL_SERVER_ERROR


async def geopath_error_handler(request: Request, exc: GeoPathError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        log.error("request_failed", error_type=exc.code, error=exc.message)
    return JSONResponse(
        status_code=status,
        content={"success": False, "error": {"code": exc.code, "message": exc.message}},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GeoPathError, geopath_error_handler)
