"""
geopath.api.app

FastAPI app factory for the path-finding service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Build the process-wide path service and its collaborators on startup.
- Drain analytics and dispose the DB engine on shutdown.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from geopath import __version__
from geopath.api.errors import register_error_handlers
from geopath.api.routers.dev_auth import router as dev_auth_router
from geopath.api.routers.health import router as health_router
from geopath.api.routers.paths import router as paths_router
from geopath.db.init_db import init_db
from geopath.db.repositories.analytics import build_analytics_sink
from geopath.db.repositories.paths import SqlPathRepository
from geopath.db.session import create_engine, create_sessionmaker
from geopath.observability.logging import configure_logging, get_logger
from geopath.observability.middleware import RequestContextMiddleware
from geopath.services.path_service import PathOrchestrationService
from geopath.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod uses Alembic migrations.
            await init_db(engine)

        service = PathOrchestrationService(
            repository=SqlPathRepository(sessionmaker),
            analytics=build_analytics_sink(settings, sessionmaker),
            settings=settings,
        )
        app.state.engine = engine
        app.state.sessionmaker = sessionmaker
        app.state.path_service = service
        try:
            yield
        finally:
            # Let in-flight analytics writes finish before the pool goes away.
            await service.drain()
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="GeoPath Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(paths_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This is the single composition root: the path service is built here once and
# reached by routers through `geopath.api.deps.path_service_dep`.
