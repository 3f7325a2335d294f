"""
geopath.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions, and the path service.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from geopath.services.path_service import PathOrchestrationService
from geopath.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The app factory stores the settings it was built with.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def path_service_dep(request: Request) -> PathOrchestrationService:
    # One service per process, built at startup (see `geopath.api.app`).
    return request.app.state.path_service  # type: ignore[attr-defined]


# --- Module Notes -----------------------------------------------------------
# Routers never construct services themselves; they only resolve them here.
