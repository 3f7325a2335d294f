"""
geopath.services.path_service

Path orchestration service (validation + dispatch + persistence owner).

Responsibilities:
- Validate requests before any strategy runs.
- Dispatch to the strategy registered for the requested algorithm and time it.
- Persist every successful result as a `PathRecord`.
- Emit analytics as a detached, best-effort task.
- Provide batch, history, get, and delete with ownership enforcement.
"""

from __future__ import annotations

import asyncio
import dataclasses
import enum
import time
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from geopath.domain.errors import (
    AccessDeniedError,
    GeoPathError,
    NotFoundError,
    ValidationError,
)
from geopath.domain.geo import validate_point
from geopath.domain.models import (
    AnalyticsEvent,
    History,
    PathRecord,
    PathRequest,
    PathResult,
)
from geopath.observability.logging import get_logger
from geopath.pathfinding.registry import StrategyRegistry
from geopath.services.ports import AnalyticsSink, PathRepository
from geopath.settings import Settings

log = get_logger(__name__)


class PathState(enum.StrEnum):
    validating = "VALIDATING"
    executing = "EXECUTING"
    persisting = "PERSISTING"
    completed = "COMPLETED"
    failed = "FAILED"


class PathOrchestrationService:
    """
    Built once at startup with its collaborators injected; holds no per-call
    state apart from the set of in-flight analytics tasks.
    """

    def __init__(
        self,
        *,
        repository: PathRepository,
        analytics: AnalyticsSink,
        settings: Settings,
        registry: StrategyRegistry | None = None,
    ) -> None:
        self._repository = repository
        self._analytics = analytics
        self._settings = settings
        self._registry = registry or StrategyRegistry.default(
            max_steps=settings.max_steps, max_lanes=settings.max_lanes
        )
        self._pending: set[asyncio.Task[None]] = set()

    async def find(self, request: PathRequest) -> PathResult:
        logger = log.bind(owner_id=request.owner_id, algorithm=str(request.algorithm))
        state = PathState.validating
        try:
            start = validate_point(request.start, "start")
            end = validate_point(request.end, "end")
            if not request.owner_id:
                raise ValidationError("owner_id is required")
            if not isinstance(request.options, dict):
                raise ValidationError("Options must be an object")
            strategy = self._registry.resolve(request.algorithm)
            options = dict(request.options)
            # Fail fast on bad options before spending CPU on the search.
            strategy.parse_options(options)

            state = _advance(logger, PathState.executing)
            started = time.perf_counter()
            outcome = await asyncio.to_thread(strategy.find_path, start, end, options)
            duration_ms = int((time.perf_counter() - started) * 1000)

            state = _advance(logger, PathState.persisting)
            record = PathRecord(
                id="",
                owner_id=request.owner_id,
                start=start,
                end=end,
                algorithm=strategy.algorithm_id.value,
                path=outcome.path,
                distance=outcome.distance,
                duration_ms=duration_ms,
                options=options,
                metadata=outcome.metadata,
                is_public=request.is_public or options.get("isPublic") is True,
                created_at=datetime.now(UTC),
            )
            record_id = await self._repository.create(record)
        except GeoPathError as e:
            logger.warning("path_failed", state=state, error_type=e.code, error=e.message)
            raise

        _advance(logger, PathState.completed)
        self._emit_analytics(
            AnalyticsEvent(
                owner_id=record.owner_id,
                algorithm=record.algorithm,
                duration_ms=duration_ms,
                distance=record.distance,
                timestamp=datetime.now(UTC),
            )
        )
        logger.info(
            "path_found",
            path_id=record_id,
            distance_km=round(record.distance, 6),
            duration_ms=duration_ms,
            nodes_explored=outcome.metadata.get("nodesExplored"),
        )
        return PathResult(
            id=record_id,
            path=record.path,
            distance=record.distance,
            duration_ms=duration_ms,
            algorithm=record.algorithm,
            metadata=record.metadata,
        )

    async def batch_find(
        self, requests: Sequence[PathRequest], owner_id: str
    ) -> list[PathResult]:
        results: list[PathResult] = []
        for request in requests:
            try:
                results.append(await self.find(dataclasses.replace(request, owner_id=owner_id)))
            except Exception as e:
                # One failed item must not abort its siblings; the error travels in metadata.
                if not isinstance(e, GeoPathError):
                    log.exception("batch_item_error", owner_id=owner_id, index=len(results))
                results.append(PathResult.failed(algorithm=request.algorithm, error=e))
        return results

    async def history(self, owner_id: str, page: int, page_size: int) -> History:
        _require_positive_int(page, "page")
        _require_positive_int(page_size, "page_size")
        if page_size > self._settings.max_page_size:
            raise ValidationError(f"page_size must be at most {self._settings.max_page_size}")

        records, total = await self._repository.query(
            owner_id, limit=page_size, offset=(page - 1) * page_size
        )
        return History(records=records, total=total)

    async def get(self, record_id: str, owner_id: str) -> PathRecord:
        record = await self._repository.get(record_id)
        if record is None:
            raise NotFoundError("Path not found")
        if record.owner_id != owner_id and not record.is_public:
            raise AccessDeniedError("Access denied to this path")
        return record

    async def delete(self, record_id: str, owner_id: str) -> None:
        record = await self._repository.get(record_id)
        if record is None:
            raise NotFoundError("Path not found")
        # Public visibility grants reads only; deletion is always owner-only.
        if record.owner_id != owner_id:
            raise AccessDeniedError("Access denied to this path")
        await self._repository.delete(record_id)
        log.info("path_deleted", path_id=record_id, owner_id=owner_id)

    def algorithms(self) -> list[str]:
        return self._registry.ids()

    async def drain(self) -> None:
        """
        Wait for in-flight analytics tasks (shutdown hooks and tests).
        """

        if self._pending:
            await asyncio.gather(*list(self._pending))

    def _emit_analytics(self, event: AnalyticsEvent) -> None:
        task = asyncio.create_task(self._record_analytics(event))
        # Hold a strong reference until done; the loop only keeps weak ones.
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record_analytics(self, event: AnalyticsEvent) -> None:
        try:
            await self._analytics.record(event)
        except Exception as e:
            log.warning(
                "analytics_failed",
                owner_id=event.owner_id,
                algorithm=event.algorithm,
                error_type=type(e).__name__,
                error=str(e),
            )


def _advance(logger: Any, state: PathState) -> PathState:
    logger.debug("path_state", state=state)
    return state


def _require_positive_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{name} must be a positive integer")


# --- Module Notes -----------------------------------------------------------
# No retries happen here; a failed `find` leaves nothing persisted and the caller
# decides whether to try again.
