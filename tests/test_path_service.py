"""
tests.test_path_service

Orchestration: validation, dispatch, persistence, analytics, batch isolation,
history paging, and ownership checks, all against in-memory collaborators.
"""

from __future__ import annotations

import asyncio

import pytest

from geopath.domain.errors import (
    AccessDeniedError,
    NotFoundError,
    PathNotFoundError,
    PersistenceError,
    ValidationError,
)
from geopath.domain.geo import Point
from geopath.domain.models import PathRecord
from geopath.services.path_service import PathOrchestrationService
from geopath.settings import Settings
from tests.conftest import (
    NYC,
    TIMES_SQUARE,
    BlockingAnalyticsSink,
    FailingAnalyticsSink,
    InMemoryPathRepository,
    RecordingAnalyticsSink,
    make_request,
)


@pytest.mark.asyncio
async def test_find_persists_and_returns_result(
    service: PathOrchestrationService,
    repository: InMemoryPathRepository,
    analytics: RecordingAnalyticsSink,
) -> None:
    result = await service.find(make_request("astar"))
    await service.drain()

    assert result.id
    assert result.path[0] == NYC
    assert result.path[-1] == TIMES_SQUARE
    assert len(result.path) == 11
    assert result.distance > 0
    assert result.duration_ms >= 0
    assert result.algorithm == "astar"
    assert result.metadata["algorithm"] == "A*"

    stored = repository.records[result.id]
    assert stored.owner_id == "alice"
    assert stored.path == result.path
    assert stored.is_public is False

    assert len(analytics.events) == 1
    event = analytics.events[0]
    assert event.owner_id == "alice"
    assert event.algorithm == "astar"
    assert event.distance == result.distance
    assert event.type == "pathfinding"


@pytest.mark.asyncio
@pytest.mark.parametrize("algorithm", ["astar", "dijkstra", "bfs"])
async def test_find_is_repeatable(service: PathOrchestrationService, algorithm: str) -> None:
    first = await service.find(make_request(algorithm, options={"steps": 7}))
    second = await service.find(make_request(algorithm, options={"steps": 7}))

    assert first.id != second.id
    assert len(first.path) == len(second.path) == 8
    assert first.distance == second.distance


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "request_kwargs",
    [
        {"start": Point(lat=91, lng=0)},
        {"end": Point(lat=0, lng=-180.5)},
        {"algorithm": "greedy"},
        {"options": {"steps": 0}},
        {"owner_id": ""},
    ],
)
async def test_invalid_requests_fail_before_execution(
    service: PathOrchestrationService,
    repository: InMemoryPathRepository,
    analytics: RecordingAnalyticsSink,
    request_kwargs: dict,
) -> None:
    kwargs = dict(request_kwargs)
    algorithm = kwargs.pop("algorithm", "astar")
    with pytest.raises(ValidationError):
        await service.find(make_request(algorithm, **kwargs))
    await service.drain()

    assert repository.records == {}
    assert analytics.events == []


@pytest.mark.asyncio
async def test_unreachable_goal_propagates(
    service: PathOrchestrationService, repository: InMemoryPathRepository
) -> None:
    blocked = {"steps": 4, "lanes": 0, "blocked": [[2, 0]]}
    with pytest.raises(PathNotFoundError):
        await service.find(make_request("dijkstra", options=blocked))
    assert repository.records == {}


@pytest.mark.asyncio
async def test_persistence_failure_propagates(settings: Settings) -> None:
    class BrokenRepository(InMemoryPathRepository):
        async def create(self, record: PathRecord) -> str:
            raise PersistenceError("disk full")

    analytics = RecordingAnalyticsSink()
    service = PathOrchestrationService(
        repository=BrokenRepository(), analytics=analytics, settings=settings
    )
    with pytest.raises(PersistenceError):
        await service.find(make_request())
    await service.drain()
    assert analytics.events == []


@pytest.mark.asyncio
async def test_analytics_failure_is_swallowed(
    repository: InMemoryPathRepository, settings: Settings
) -> None:
    analytics = FailingAnalyticsSink()
    service = PathOrchestrationService(
        repository=repository, analytics=analytics, settings=settings
    )

    result = await service.find(make_request("bfs"))
    await service.drain()

    assert result.id in repository.records
    assert analytics.calls == 1


@pytest.mark.asyncio
async def test_analytics_does_not_block_find(
    repository: InMemoryPathRepository, settings: Settings
) -> None:
    analytics = BlockingAnalyticsSink()
    service = PathOrchestrationService(
        repository=repository, analytics=analytics, settings=settings
    )

    result = await asyncio.wait_for(service.find(make_request()), timeout=5)
    assert result.id
    assert analytics.events == []

    analytics.release.set()
    await service.drain()
    assert len(analytics.events) == 1


@pytest.mark.asyncio
async def test_public_flag_from_request_or_options(
    service: PathOrchestrationService, repository: InMemoryPathRepository
) -> None:
    a = await service.find(make_request(is_public=True))
    b = await service.find(make_request(options={"isPublic": True}))
    c = await service.find(make_request(options={"isPublic": "yes"}))

    assert repository.records[a.id].is_public is True
    assert repository.records[b.id].is_public is True
    assert repository.records[c.id].is_public is False


@pytest.mark.asyncio
async def test_batch_isolates_failures_in_order(service: PathOrchestrationService) -> None:
    requests = [
        make_request("astar"),
        make_request("dijkstra", start=Point(lat=123, lng=0)),
        make_request("bfs"),
    ]

    results = await service.batch_find(requests, "alice")

    assert len(results) == 3
    assert results[0].id and results[0].algorithm == "astar"
    assert results[2].id and results[2].algorithm == "bfs"

    failed = results[1]
    assert failed.id == ""
    assert failed.path == []
    assert failed.distance == 0
    assert failed.algorithm == "dijkstra"
    assert "latitude" in failed.metadata["error"]
    assert failed.metadata["errorType"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_batch_assigns_the_batch_owner(
    service: PathOrchestrationService, repository: InMemoryPathRepository
) -> None:
    results = await service.batch_find(
        [make_request(owner_id="mallory"), make_request("unknown", owner_id="mallory")], "bob"
    )

    assert repository.records[results[0].id].owner_id == "bob"
    assert results[1].algorithm == "unknown"
    assert "Unsupported algorithm" in results[1].metadata["error"]


@pytest.mark.asyncio
async def test_batch_of_nothing_is_empty(service: PathOrchestrationService) -> None:
    assert await service.batch_find([], "alice") == []


@pytest.mark.asyncio
async def test_history_pages_newest_first(service: PathOrchestrationService) -> None:
    created = [(await service.find(make_request())).id for _ in range(5)]
    await service.find(make_request(owner_id="bob"))

    page1 = await service.history("alice", 1, 2)
    page3 = await service.history("alice", 3, 2)
    beyond = await service.history("alice", 4, 2)

    assert len(page1.records) == 2
    assert page1.total == 5
    assert [r.id for r in page1.records] == [created[4], created[3]]
    assert [r.id for r in page3.records] == [created[0]]
    assert beyond.records == []
    assert beyond.total == 5


@pytest.mark.asyncio
async def test_history_for_unknown_owner_is_empty(service: PathOrchestrationService) -> None:
    history = await service.history("nobody", 1, 20)
    assert history.records == []
    assert history.total == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("page", "page_size"),
    [(0, 10), (-1, 10), (1, 0), (1, -5), (1, 51), ("1", 10), (1, 2.0), (True, 10)],
)
async def test_history_rejects_bad_pagination(
    service: PathOrchestrationService, page: object, page_size: object
) -> None:
    with pytest.raises(ValidationError):
        await service.history("alice", page, page_size)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_get_enforces_visibility(service: PathOrchestrationService) -> None:
    private = await service.find(make_request())
    public = await service.find(make_request(is_public=True))

    assert (await service.get(private.id, "alice")).id == private.id
    assert (await service.get(public.id, "stranger")).id == public.id
    with pytest.raises(AccessDeniedError):
        await service.get(private.id, "stranger")
    with pytest.raises(NotFoundError):
        await service.get("missing", "alice")


@pytest.mark.asyncio
async def test_delete_is_owner_only(
    service: PathOrchestrationService, repository: InMemoryPathRepository
) -> None:
    public = await service.find(make_request(is_public=True))

    with pytest.raises(AccessDeniedError):
        await service.delete(public.id, "stranger")
    assert public.id in repository.records

    await service.delete(public.id, "alice")
    assert public.id not in repository.records

    with pytest.raises(NotFoundError):
        await service.delete(public.id, "alice")


@pytest.mark.asyncio
async def test_delete_unknown_id(service: PathOrchestrationService) -> None:
    with pytest.raises(NotFoundError):
        await service.delete("does-not-exist", "anyone")


def test_algorithms_lists_registered_ids(service: PathOrchestrationService) -> None:
    assert sorted(service.algorithms()) == ["astar", "bfs", "dijkstra"]
