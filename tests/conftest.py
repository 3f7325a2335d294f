"""
tests.conftest

Shared fixtures: in-memory collaborators for the path service.
"""

from __future__ import annotations

import asyncio
import dataclasses
import itertools

import pytest

from geopath.domain.errors import AnalyticsError
from geopath.domain.geo import Point
from geopath.domain.models import AnalyticsEvent, PathRecord, PathRequest
from geopath.services.path_service import PathOrchestrationService
from geopath.settings import Settings

NYC = Point(lat=40.7128, lng=-74.0060)
TIMES_SQUARE = Point(lat=40.7589, lng=-73.9851)


class InMemoryPathRepository:
    def __init__(self) -> None:
        self.records: dict[str, PathRecord] = {}
        self._order: dict[str, int] = {}
        self._ids = itertools.count(1)

    async def create(self, record: PathRecord) -> str:
        seq = next(self._ids)
        record_id = f"path-{seq}"
        self.records[record_id] = dataclasses.replace(record, id=record_id)
        self._order[record_id] = seq
        return record_id

    async def get(self, record_id: str) -> PathRecord | None:
        return self.records.get(record_id)

    async def query(
        self, owner_id: str, *, limit: int, offset: int
    ) -> tuple[list[PathRecord], int]:
        owned = [r for r in self.records.values() if r.owner_id == owner_id]
        owned.sort(key=lambda r: (r.created_at, self._order[r.id]), reverse=True)
        return owned[offset : offset + limit], len(owned)

    async def delete(self, record_id: str) -> None:
        self.records.pop(record_id, None)


class RecordingAnalyticsSink:
    def __init__(self) -> None:
        self.events: list[AnalyticsEvent] = []

    async def record(self, event: AnalyticsEvent) -> None:
        self.events.append(event)


class FailingAnalyticsSink:
    def __init__(self) -> None:
        self.calls = 0

    async def record(self, event: AnalyticsEvent) -> None:
        self.calls += 1
        raise AnalyticsError("analytics store unavailable")


class BlockingAnalyticsSink:
    def __init__(self) -> None:
        self.release = asyncio.Event()
        self.events: list[AnalyticsEvent] = []

    async def record(self, event: AnalyticsEvent) -> None:
        await self.release.wait()
        self.events.append(event)


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", max_page_size=50)


@pytest.fixture
def repository() -> InMemoryPathRepository:
    return InMemoryPathRepository()


@pytest.fixture
def analytics() -> RecordingAnalyticsSink:
    return RecordingAnalyticsSink()


@pytest.fixture
def service(
    repository: InMemoryPathRepository,
    analytics: RecordingAnalyticsSink,
    settings: Settings,
) -> PathOrchestrationService:
    return PathOrchestrationService(repository=repository, analytics=analytics, settings=settings)


def make_request(
    algorithm: str = "astar",
    *,
    owner_id: str = "alice",
    start: Point = NYC,
    end: Point = TIMES_SQUARE,
    options: dict | None = None,
    is_public: bool = False,
) -> PathRequest:
    return PathRequest(
        start=start,
        end=end,
        algorithm=algorithm,
        owner_id=owner_id,
        options=options or {},
        is_public=is_public,
    )
