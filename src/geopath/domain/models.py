"""
geopath.domain.models

Core value types for path requests, results, and persisted records.

Responsibilities:
- Define the algorithm identifiers accepted by the service.
- Define the per-call request, the strategy-facing result, and the persisted record.
- Define the write-once analytics event.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from geopath.domain.geo import Point, points_to_dicts


class AlgorithmId(enum.StrEnum):
    # Values are stored in DB rows and accepted on the wire; treat as stable API contract.
    astar = "astar"
    dijkstra = "dijkstra"
    bfs = "bfs"


@dataclass(frozen=True, slots=True)
class PathRequest:
    start: Point
    end: Point
    # Kept as a raw string so unknown ids reach validation instead of failing construction.
    algorithm: str
    owner_id: str
    options: dict[str, Any] = field(default_factory=dict)
    is_public: bool = False


@dataclass(frozen=True, slots=True)
class PathResult:
    id: str
    path: list[Point]
    distance: float
    duration_ms: int
    algorithm: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def failed(cls, *, algorithm: str, error: Exception) -> PathResult:
        """
        Degenerate result used by batch execution in place of a failed item.
        """

        code = getattr(error, "code", type(error).__name__)
        return cls(
            id="",
            path=[],
            distance=0.0,
            duration_ms=0,
            algorithm=str(algorithm),
            metadata={"error": str(error) or "Unknown error", "errorType": code},
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": points_to_dicts(self.path),
            "distance": self.distance,
            "duration_ms": self.duration_ms,
            "algorithm": self.algorithm,
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class PathRecord:
    id: str
    owner_id: str
    start: Point
    end: Point
    algorithm: str
    path: list[Point]
    distance: float
    duration_ms: int
    options: dict[str, Any]
    metadata: dict[str, Any]
    is_public: bool
    created_at: datetime

    def to_result(self) -> PathResult:
        return PathResult(
            id=self.id,
            path=list(self.path),
            distance=self.distance,
            duration_ms=self.duration_ms,
            algorithm=self.algorithm,
            metadata=dict(self.metadata),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            **self.to_result().as_dict(),
            "owner_id": self.owner_id,
            "start": self.start.as_dict(),
            "end": self.end.as_dict(),
            "options": self.options,
            "is_public": self.is_public,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class AnalyticsEvent:
    owner_id: str
    algorithm: str
    duration_ms: int
    distance: float
    timestamp: datetime
    type: str = "pathfinding"


@dataclass(frozen=True, slots=True)
class History:
    records: list[PathRecord]
    total: int


# --- Module Notes -----------------------------------------------------------
# Records are immutable once created; the only lifecycle transition after
# creation is deletion through the service's ownership-checked `delete`.
