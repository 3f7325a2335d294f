"""
geopath.pathfinding.bfs

Breadth-first search over the corridor grid.

Responsibilities:
- Level-by-level expansion with a FIFO frontier.
- Minimum hop count (not necessarily minimum distance); first discovery wins.
"""

from __future__ import annotations

from collections import deque
from typing import Any

from geopath.domain.errors import PathNotFoundError
from geopath.domain.models import AlgorithmId
from geopath.pathfinding.base import PathfindingStrategy
from geopath.pathfinding.grid import CorridorGrid, Node, reconstruct


class BFSStrategy(PathfindingStrategy):
    algorithm_id = AlgorithmId.bfs
    display_name = "BFS"
    default_steps = 8

    def _search(self, grid: CorridorGrid) -> tuple[list[Node], int]:
        source, target = grid.source, grid.target
        came_from: dict[Node, Node | None] = {source: None}
        queue: deque[Node] = deque([source])

        while queue:
            node = queue.popleft()
            for nxt in grid.neighbors(node):
                if nxt in came_from:
                    continue
                came_from[nxt] = node
                # Goal test on discovery: the first time we see target is the fewest hops.
                if nxt == target:
                    return reconstruct(came_from, target), len(came_from)
                queue.append(nxt)

        raise PathNotFoundError("BFS could not connect start and end")

    def _markers(self) -> dict[str, Any]:
        return {"pathType": "shortest_hops"}
