"""
geopath.pathfinding.astar

A* search over the corridor grid.

Responsibilities:
- Best-first expansion ordered by cumulative cost plus haversine-to-goal.
- Optimal path length: the heuristic is consistent for haversine edge weights.
"""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Any

from geopath.domain.errors import PathNotFoundError
from geopath.domain.models import AlgorithmId
from geopath.pathfinding.base import PathfindingStrategy
from geopath.pathfinding.grid import CorridorGrid, Node, reconstruct


class AStarStrategy(PathfindingStrategy):
    algorithm_id = AlgorithmId.astar
    display_name = "A*"
    default_steps = 10

    def _search(self, grid: CorridorGrid) -> tuple[list[Node], int]:
        source, target = grid.source, grid.target
        tiebreak = itertools.count()

        # Heap entries: (f, g, insertion order, node). Equal f prefers the lower g.
        open_heap: list[tuple[float, float, int, Node]] = [
            (grid.heuristic(source), 0.0, next(tiebreak), source)
        ]
        g_score: dict[Node, float] = {source: 0.0}
        came_from: dict[Node, Node | None] = {source: None}
        closed: set[Node] = set()

        while open_heap:
            _, g, _, node = heapq.heappop(open_heap)
            if node in closed:
                continue
            closed.add(node)
            if node == target:
                return reconstruct(came_from, target), len(closed)

            for nxt in grid.neighbors(node):
                if nxt in closed:
                    continue
                tentative = g + grid.cost(node, nxt)
                if tentative < g_score.get(nxt, math.inf):
                    g_score[nxt] = tentative
                    came_from[nxt] = node
                    heapq.heappush(
                        open_heap,
                        (tentative + grid.heuristic(nxt), tentative, next(tiebreak), nxt),
                    )

        raise PathNotFoundError("A* could not connect start and end")

    def _markers(self) -> dict[str, Any]:
        return {"heuristic": "haversine"}
