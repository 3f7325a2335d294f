"""
geopath.pathfinding.grid

Corridor grid: the traversable node graph searched by every strategy.

Responsibilities:
- Lay a lattice of columns (progress from start to end) and lanes (lateral
  offsets) between two endpoints.
- Expose nodes, neighbors, edge costs, and the goal heuristic.
- Model obstacles as blocked cells removed from the graph.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from geopath.domain.geo import Point, clamp_lat, haversine_distance, wrap_lng

Node: TypeAlias = tuple[int, int]  # (column, lane)


class CorridorGrid:
    """
    Column 0 holds only `start` and column `steps` holds only `end`; interior
    columns hold lanes `-lanes..lanes`. Edges run forward to the next column
    (straight or one lane over) and sideways within a column. Edge weight is
    the haversine distance between node positions.
    """

    def __init__(
        self,
        start: Point,
        end: Point,
        *,
        steps: int,
        lanes: int,
        lane_width: float = 1.0,
        blocked: frozenset[Node] = frozenset(),
    ) -> None:
        self.start = start
        self.end = end
        self.steps = steps
        self.lanes = lanes
        self.blocked = blocked
        self.source: Node = (0, 0)
        self.target: Node = (steps, 0)

        self._dlat = end.lat - start.lat
        self._dlng = end.lng - start.lng
        # Perpendicular of the start->end segment, one column long (degree space).
        self._off_lat = -self._dlng / steps * lane_width
        self._off_lng = self._dlat / steps * lane_width
        self._points: dict[Node, Point] = {self.source: start, self.target: end}

    def contains(self, node: Node) -> bool:
        column, lane = node
        if column < 0 or column > self.steps:
            return False
        if column in (0, self.steps):
            return lane == 0
        if abs(lane) > self.lanes:
            return False
        return node not in self.blocked

    def point(self, node: Node) -> Point:
        cached = self._points.get(node)
        if cached is not None:
            return cached
        column, lane = node
        t = column / self.steps
        p = Point(
            lat=clamp_lat(self.start.lat + self._dlat * t + lane * self._off_lat),
            lng=wrap_lng(self.start.lng + self._dlng * t + lane * self._off_lng),
        )
        self._points[node] = p
        return p

    def neighbors(self, node: Node) -> Iterator[Node]:
        # Fixed order keeps every search deterministic: straight ahead first.
        column, lane = node
        for candidate in (
            (column + 1, lane),
            (column + 1, lane - 1),
            (column + 1, lane + 1),
            (column, lane - 1),
            (column, lane + 1),
        ):
            if self.contains(candidate):
                yield candidate

    def cost(self, u: Node, v: Node) -> float:
        return haversine_distance(self.point(u), self.point(v))

    def heuristic(self, node: Node) -> float:
        # Straight-line great-circle distance never overestimates a sum of haversine legs.
        return haversine_distance(self.point(node), self.end)

    def to_points(self, nodes: list[Node]) -> list[Point]:
        return [self.point(n) for n in nodes]


def reconstruct(came_from: dict[Node, Node | None], target: Node) -> list[Node]:
    nodes: list[Node] = [target]
    current = came_from.get(target)
    while current is not None:
        nodes.append(current)
        current = came_from.get(current)
    nodes.reverse()
    return nodes


# --- Module Notes -----------------------------------------------------------
# A real road/terrain graph can replace this class as long as it offers the same
# `source`/`target`/`neighbors`/`cost`/`heuristic`/`to_points` surface.
