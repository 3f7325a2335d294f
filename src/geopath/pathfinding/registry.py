"""
geopath.pathfinding.registry

Algorithm id -> strategy lookup.

Responsibilities:
- Build exactly one strategy instance per `AlgorithmId`.
- Reject unknown ids with `ValidationError` so callers never branch on strings.
"""

from __future__ import annotations

from collections.abc import Mapping

from geopath.domain.errors import ValidationError
from geopath.domain.models import AlgorithmId
from geopath.pathfinding.astar import AStarStrategy
from geopath.pathfinding.base import PathfindingStrategy
from geopath.pathfinding.bfs import BFSStrategy
from geopath.pathfinding.dijkstra import DijkstraStrategy

STRATEGY_TYPES: tuple[type[PathfindingStrategy], ...] = (
    AStarStrategy,
    DijkstraStrategy,
    BFSStrategy,
)


class StrategyRegistry:
    def __init__(self, strategies: Mapping[AlgorithmId, PathfindingStrategy]) -> None:
        self._strategies = dict(strategies)

    @classmethod
    def default(cls, *, max_steps: int = 500, max_lanes: int = 10) -> StrategyRegistry:
        return cls(
            {
                t.algorithm_id: t(max_steps=max_steps, max_lanes=max_lanes)
                for t in STRATEGY_TYPES
            }
        )

    def resolve(self, algorithm: str) -> PathfindingStrategy:
        try:
            algorithm_id = AlgorithmId(algorithm)
        except ValueError:
            raise ValidationError(f"Unsupported algorithm: {algorithm}") from None
        strategy = self._strategies.get(algorithm_id)
        if strategy is None:
            raise ValidationError(f"Unsupported algorithm: {algorithm}")
        return strategy

    def ids(self) -> list[str]:
        return [a.value for a in self._strategies]


# --- Module Notes -----------------------------------------------------------
# New algorithms are added as a new `PathfindingStrategy` subclass plus an
# `AlgorithmId` member; nothing else dispatches on the id string.
