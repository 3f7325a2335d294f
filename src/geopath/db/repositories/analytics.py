"""
geopath.db.repositories.analytics

Analytics sinks.

Responsibilities:
- `SqlAnalyticsSink`: append an `analytics_events` row per search.
- `LogAnalyticsSink`: emit the event as a structured log line instead.
- `build_analytics_sink`: pick the sink named by settings.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from geopath.db.models import AnalyticsEventRow
from geopath.domain.errors import AnalyticsError
from geopath.domain.models import AnalyticsEvent
from geopath.observability.logging import get_logger
from geopath.services.ports import AnalyticsSink
from geopath.settings import Settings

log = get_logger(__name__)


class SqlAnalyticsSink:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def record(self, event: AnalyticsEvent) -> None:
        # Own session: the request that triggered the event may already be finished.
        try:
            async with self._session_factory() as session:
                session.add(
                    AnalyticsEventRow(
                        owner_id=event.owner_id,
                        type=event.type,
                        algorithm=event.algorithm,
                        duration_ms=event.duration_ms,
                        distance=event.distance,
                        timestamp=event.timestamp,
                    )
                )
                await session.commit()
        except SQLAlchemyError as e:
            raise AnalyticsError(f"Failed to record analytics event: {e}") from e


class LogAnalyticsSink:
    async def record(self, event: AnalyticsEvent) -> None:
        log.info(
            "analytics_event",
            event_type=event.type,
            owner_id=event.owner_id,
            algorithm=event.algorithm,
            duration_ms=event.duration_ms,
            distance_km=event.distance,
            timestamp=event.timestamp.isoformat(),
        )


class NullAnalyticsSink:
    async def record(self, event: AnalyticsEvent) -> None:
        return None


def build_analytics_sink(
    settings: Settings, session_factory: async_sessionmaker[AsyncSession]
) -> AnalyticsSink:
    if settings.analytics_backend == "db":
        return SqlAnalyticsSink(session_factory)
    if settings.analytics_backend == "log":
        return LogAnalyticsSink()
    return NullAnalyticsSink()
