"""
geopath.domain.errors

Error taxonomy for the path-finding core.

Responsibilities:
- Give every failure a stable machine-readable `code`.
- Let the API layer map errors to HTTP statuses without string matching.
"""

from __future__ import annotations


class GeoPathError(Exception):
    code = "GEOPATH_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GeoPathError):
    """Bad coordinates, unknown algorithm, bad options, or malformed pagination."""

    code = "VALIDATION_ERROR"


class PathNotFoundError(GeoPathError):
    """The chosen strategy could not connect start and end."""

    code = "PATH_NOT_FOUND"


class NotFoundError(GeoPathError):
    code = "NOT_FOUND"


class AccessDeniedError(GeoPathError):
    code = "ACCESS_DENIED"


class PersistenceError(GeoPathError):
    """Repository failure; propagated to the caller, never retried here."""

    code = "PERSISTENCE_ERROR"


class AnalyticsError(GeoPathError):
    """Analytics sink failure; always logged and swallowed by the service."""

    code = "ANALYTICS_ERROR"


# --- Module Notes -----------------------------------------------------------
# `ValidationError` intentionally shadows pydantic's name inside this package;
# import pydantic's as `pydantic.ValidationError` where both are needed.
