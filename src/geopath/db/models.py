"""
geopath.db.models

Persistence schema for path records and analytics events.

Responsibilities:
- `PathRow`: one persisted path search result, owned by a caller identity.
- `AnalyticsEventRow`: append-only analytics trail per search.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Enum, Float, Index, Integer, String
from sqlalchemy import Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from geopath.db.base import Base
from geopath.domain.models import AlgorithmId


def _utcnow() -> datetime:
    return datetime.now(UTC)


class PathRow(Base):
    __tablename__ = "paths"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[str] = mapped_column(String(256), nullable=False, index=True)

    start_lat: Mapped[float] = mapped_column(Float, nullable=False)
    start_lng: Mapped[float] = mapped_column(Float, nullable=False)
    end_lat: Mapped[float] = mapped_column(Float, nullable=False)
    end_lng: Mapped[float] = mapped_column(Float, nullable=False)

    algorithm: Mapped[AlgorithmId] = mapped_column(Enum(AlgorithmId), nullable=False)
    # Waypoints as [{"lat": ..., "lng": ...}, ...] in travel order.
    path: Mapped[list[dict[str, float]]] = mapped_column(JSON, nullable=False)
    distance: Mapped[float] = mapped_column(Float, nullable=False)
    duration_ms: Mapped[int] = mapped_column(Integer, nullable=False)

    options: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    # `metadata` is reserved on declarative classes; keep the column name, rename the attribute.
    meta: Mapped[dict[str, Any]] = mapped_column("metadata", JSON, nullable=False, default=dict)

    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    __table_args__ = (Index("ix_paths_owner_created", "owner_id", "created_at"),)


class AnalyticsEventRow(Base):
    __tablename__ = "analytics_events"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[str] = mapped_column(String(256), nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False, default="pathfinding")
    algorithm: Mapped[str] = mapped_column(String(32), nullable=False)
    duration_ms: Mapped[int] = mapped_column(Integer, nullable=False)
    distance: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True
    )

    __table_args__ = (Index("ix_analytics_owner_timestamp", "owner_id", "timestamp"),)


# --- Module Notes -----------------------------------------------------------
# Rows are never updated; the only mutation after insert is deleting a `PathRow`.
