"""
geopath.services.ports

Collaborator contracts used by the path service.

Responsibilities:
- `PathRepository`: create/get/query/delete persisted path records.
- `AnalyticsSink`: best-effort, write-once analytics event recording.
"""

from __future__ import annotations

from typing import Protocol

from geopath.domain.models import AnalyticsEvent, PathRecord


class PathRepository(Protocol):
    async def create(self, record: PathRecord) -> str:
        """Persist a new record and return its repository-assigned id."""
        ...

    async def get(self, record_id: str) -> PathRecord | None: ...

    async def query(
        self, owner_id: str, *, limit: int, offset: int
    ) -> tuple[list[PathRecord], int]:
        """Owner's records ordered by `created_at` desc, plus the unsliced total."""
        ...

    async def delete(self, record_id: str) -> None: ...


class AnalyticsSink(Protocol):
    async def record(self, event: AnalyticsEvent) -> None: ...


# --- Module Notes -----------------------------------------------------------
# Implementations raise `PersistenceError` / `AnalyticsError`; the service decides
# which of those propagate.
