"""
geopath.pathfinding.base

Strategy contract shared by A*, Dijkstra, and BFS.

Responsibilities:
- Parse and validate search options (`steps`, `lanes`, `lane_width`, `blocked`).
- Build the corridor grid, time the search, and assemble result metadata.
- Leave only the frontier discipline to each concrete strategy.
"""

from __future__ import annotations

import abc
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from geopath.domain.errors import ValidationError
from geopath.domain.geo import Point, path_length
from geopath.domain.models import AlgorithmId
from geopath.pathfinding.grid import CorridorGrid, Node

DEFAULT_LANES = 2
MAX_LANE_WIDTH = 10.0


@dataclass(frozen=True, slots=True)
class SearchOptions:
    steps: int
    lanes: int = DEFAULT_LANES
    lane_width: float = 1.0
    blocked: frozenset[Node] = frozenset()


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    path: list[Point]
    distance: float
    metadata: dict[str, Any] = field(default_factory=dict)


class PathfindingStrategy(abc.ABC):
    """
    Each call is independent: the grid and all search bookkeeping are local to
    `find_path`, so a single strategy instance can serve concurrent callers.
    """

    algorithm_id: ClassVar[AlgorithmId]
    display_name: ClassVar[str]
    default_steps: ClassVar[int]

    def __init__(self, *, max_steps: int = 500, max_lanes: int = 10) -> None:
        self._max_steps = max_steps
        self._max_lanes = max_lanes

    def parse_options(self, options: Mapping[str, Any] | None) -> SearchOptions:
        raw = dict(options or {})
        steps = _int_option(raw, "steps", self.default_steps, lo=1, hi=self._max_steps)
        lanes = _int_option(raw, "lanes", DEFAULT_LANES, lo=0, hi=self._max_lanes)

        lane_width = raw.get("lane_width", 1.0)
        if isinstance(lane_width, bool) or not isinstance(lane_width, int | float):
            raise ValidationError("Option 'lane_width' must be a number")
        if not 0 < lane_width <= MAX_LANE_WIDTH:
            raise ValidationError(f"Option 'lane_width' must be in (0, {MAX_LANE_WIDTH}]")

        blocked = _blocked_cells(raw.get("blocked", []), steps=steps, lanes=lanes)
        return SearchOptions(
            steps=steps, lanes=lanes, lane_width=float(lane_width), blocked=blocked
        )

    def find_path(
        self, start: Point, end: Point, options: Mapping[str, Any] | None = None
    ) -> SearchOutcome:
        started = time.perf_counter()
        parsed = self.parse_options(options)
        grid = CorridorGrid(
            start,
            end,
            steps=parsed.steps,
            lanes=parsed.lanes,
            lane_width=parsed.lane_width,
            blocked=parsed.blocked,
        )

        nodes, explored = self._search(grid)
        path = grid.to_points(nodes)
        metadata: dict[str, Any] = {
            "algorithm": self.display_name,
            "nodesExplored": explored,
            "executionTimeMs": int((time.perf_counter() - started) * 1000),
            "steps": parsed.steps,
            "lanes": parsed.lanes,
            **self._markers(),
            "options": dict(options or {}),
        }
        return SearchOutcome(path=path, distance=path_length(path), metadata=metadata)

    @abc.abstractmethod
    def _search(self, grid: CorridorGrid) -> tuple[list[Node], int]:
        """
        Return (node path from grid.source to grid.target, nodes explored).
        Raise `PathNotFoundError` when the target is unreachable.
        """

    def _markers(self) -> dict[str, Any]:
        return {}


def _int_option(raw: dict[str, Any], key: str, default: int, *, lo: int, hi: int) -> int:
    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Option '{key}' must be an integer")
    if value < lo or value > hi:
        raise ValidationError(f"Option '{key}' must be between {lo} and {hi}")
    return value


def _blocked_cells(raw: Any, *, steps: int, lanes: int) -> frozenset[Node]:
    if not isinstance(raw, list | tuple):
        raise ValidationError("Option 'blocked' must be a list of [column, lane] cells")

    cells: set[Node] = set()
    for item in raw:
        if (
            not isinstance(item, list | tuple)
            or len(item) != 2
            or any(isinstance(v, bool) or not isinstance(v, int) for v in item)
        ):
            raise ValidationError("Option 'blocked' must be a list of [column, lane] cells")
        column, lane = int(item[0]), int(item[1])
        if column <= 0 or column >= steps:
            raise ValidationError(f"Blocked cell {[column, lane]} must lie in an interior column")
        if abs(lane) > lanes:
            raise ValidationError(f"Blocked cell {[column, lane]} is outside the corridor")
        cells.add((column, lane))
    return frozenset(cells)


# --- Module Notes -----------------------------------------------------------
# Endpoints sit in columns 0 and `steps`, which can never be blocked; that keeps
# `path[0] is start` and `path[-1] is end` for every successful search.
