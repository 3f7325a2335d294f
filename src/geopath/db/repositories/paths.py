"""
geopath.db.repositories.paths

SQL repository for path records.

Responsibilities:
- Insert, fetch, page through, and delete `PathRow` entities.
- Translate rows to/from the domain `PathRecord`.
- Wrap driver failures in `PersistenceError`.
"""

from __future__ import annotations

import uuid
from datetime import UTC

from sqlalchemy import delete, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from geopath.db.models import PathRow
from geopath.domain.errors import PersistenceError
from geopath.domain.geo import Point, points_to_dicts
from geopath.domain.models import AlgorithmId, PathRecord


class SqlPathRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, record: PathRecord) -> str:
        row = PathRow(
            owner_id=record.owner_id,
            start_lat=record.start.lat,
            start_lng=record.start.lng,
            end_lat=record.end.lat,
            end_lng=record.end.lng,
            algorithm=AlgorithmId(record.algorithm),
            path=points_to_dicts(record.path),
            distance=record.distance,
            duration_ms=record.duration_ms,
            options=record.options,
            meta=record.metadata,
            is_public=record.is_public,
            created_at=record.created_at,
        )
        try:
            async with self._session_factory() as session:
                session.add(row)
                await session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to persist path: {e}") from e
        return str(row.id)

    async def get(self, record_id: str) -> PathRecord | None:
        key = _parse_id(record_id)
        if key is None:
            return None
        try:
            async with self._session_factory() as session:
                row = await session.get(PathRow, key)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to load path: {e}") from e
        return _to_record(row) if row is not None else None

    async def query(
        self, owner_id: str, *, limit: int, offset: int
    ) -> tuple[list[PathRecord], int]:
        stmt = (
            select(PathRow)
            .where(PathRow.owner_id == owner_id)
            .order_by(desc(PathRow.created_at), desc(PathRow.id))
            .limit(limit)
            .offset(offset)
        )
        count_stmt = select(func.count()).select_from(PathRow).where(PathRow.owner_id == owner_id)
        try:
            async with self._session_factory() as session:
                rows = (await session.execute(stmt)).scalars().all()
                total = (await session.execute(count_stmt)).scalar_one()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to query paths: {e}") from e
        return [_to_record(r) for r in rows], int(total)

    async def delete(self, record_id: str) -> None:
        key = _parse_id(record_id)
        if key is None:
            return
        try:
            async with self._session_factory() as session:
                await session.execute(delete(PathRow).where(PathRow.id == key))
                await session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to delete path: {e}") from e


def _parse_id(record_id: str) -> uuid.UUID | None:
    # Ids are opaque to callers; anything that is not one of ours simply does not exist.
    try:
        return uuid.UUID(str(record_id))
    except ValueError:
        return None


def _to_record(row: PathRow) -> PathRecord:
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops tz info on the way back out.
        created_at = created_at.replace(tzinfo=UTC)
    return PathRecord(
        id=str(row.id),
        owner_id=row.owner_id,
        start=Point(lat=row.start_lat, lng=row.start_lng),
        end=Point(lat=row.end_lat, lng=row.end_lng),
        algorithm=row.algorithm.value,
        path=[Point.from_dict(p) for p in row.path],
        distance=row.distance,
        duration_ms=row.duration_ms,
        options=dict(row.options or {}),
        metadata=dict(row.meta or {}),
        is_public=row.is_public,
        created_at=created_at,
    )


# --- Module Notes -----------------------------------------------------------
# `created_at` desc is the history order; `id` breaks ties between rows written
# within the same clock tick.
