"""
geopath.pathfinding.dijkstra

Uniform-cost (Dijkstra) search over the corridor grid.
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


class DijkstraStrategy(PathfindingStrategy):
    algorithm_id = AlgorithmId.dijkstra
    display_name = "Dijkstra"
    default_steps = 15

    def _search(self, grid: CorridorGrid) -> tuple[list[Node], int]:
        source, target = grid.source, grid.target
        tiebreak = itertools.count()

        frontier: list[tuple[float, int, Node]] = [(0.0, next(tiebreak), source)]
        dist: dict[Node, float] = {source: 0.0}
        came_from: dict[Node, Node | None] = {source: None}
        settled: set[Node] = set()

        while frontier:
            d, _, node = heapq.heappop(frontier)
            if node in settled:
                continue
            settled.add(node)
            if node == target:
                return reconstruct(came_from, target), len(settled)

            for nxt in grid.neighbors(node):
                if nxt in settled:
                    continue
                candidate = d + grid.cost(node, nxt)
                if candidate < dist.get(nxt, math.inf):
                    dist[nxt] = candidate
                    came_from[nxt] = node
                    heapq.heappush(frontier, (candidate, next(tiebreak), nxt))

        raise PathNotFoundError("Dijkstra could not connect start and end")

    def _markers(self) -> dict[str, Any]:
        return {"guaranteed": "optimal"}
