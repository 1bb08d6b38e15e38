"""Ready-made capability implementations wrapping caller-owned graphs.

These adapters do not store graphs of their own: they forward to callables
or to a ``networkx`` graph the caller already holds.

Usage:
    adjacency = GraphAdjacency(graph, goal="G")
    estimator = GoalBoundHeuristic(lambda a, b: distance[a, b], goal="G")
    path = AStar(adjacency, estimator).search_path("S", "G")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Hashable, Iterable, TypeAlias, TypeVar

import networkx as nx

T = TypeVar("T", bound=Hashable)

if TYPE_CHECKING:  # pragma: no cover - typing only
    AnyGraph: TypeAlias = nx.Graph[Any]
else:  # pragma: no cover - runtime alias without subscripting
    AnyGraph: TypeAlias = nx.Graph


def unit_cost(a: Any, b: Any) -> float:
    return 1.0


class CallableAdjacency(Generic[T]):
    """Adjacency built from plain functions.

    ``cost`` receives the same ``(neighbor, current)`` arguments the driver
    passes to :meth:`edge_cost`.
    """

    def __init__(
        self,
        neighbors: Callable[[T], Iterable[T]],
        is_goal: Callable[[T], bool],
        *,
        cost: Callable[[T, T], float] = unit_cost,
        passable: Callable[[T], bool] = lambda node: True,
    ) -> None:
        self._neighbors = neighbors
        self._is_goal = is_goal
        self._cost = cost
        self._passable = passable

    def edge_cost(self, a: T, b: T) -> float:
        return float(self._cost(a, b))

    def is_goal(self, node: T) -> bool:
        return bool(self._is_goal(node))

    def neighbors(self, node: T) -> list[T]:
        return [n for n in self._neighbors(node) if self._passable(n)]


class GoalBoundHeuristic(Generic[T]):
    """Binds a two-argument heuristic ``heuristic(node, goal)`` to ``goal``."""

    def __init__(self, heuristic: Callable[[T, T], float], goal: T) -> None:
        self._heuristic = heuristic
        self.goal = goal

    def estimate(self, node: T) -> float:
        return float(self._heuristic(node, self.goal))


class ZeroHeuristic:
    """Estimates zero everywhere, turning A* into Dijkstra's algorithm."""

    def estimate(self, node: Any) -> float:
        return 0.0


class GraphAdjacency(Generic[T]):
    """Adjacency over an existing ``networkx`` graph.

    For directed graphs the relaxed edge runs ``current -> neighbor``, so
    ``edge_cost(a, b)`` reads the ``b -> a`` edge. Multigraphs use the
    cheapest parallel edge. Missing weights fall back to ``default_weight``.
    """

    def __init__(
        self,
        graph: AnyGraph,
        goal: T,
        *,
        weight: str = "weight",
        default_weight: float = 1.0,
    ) -> None:
        self.graph = graph
        self.goal = goal
        self.weight = weight
        self.default_weight = default_weight

    def edge_cost(self, a: T, b: T) -> float:
        origin, destination = (b, a) if self.graph.is_directed() else (a, b)
        data = self.graph.get_edge_data(origin, destination)
        if data is None:
            raise KeyError((origin, destination))
        if self.graph.is_multigraph():
            return min(
                float(attrs.get(self.weight, self.default_weight))
                for attrs in data.values()
            )
        return float(data.get(self.weight, self.default_weight))

    def is_goal(self, node: T) -> bool:
        return node == self.goal

    def neighbors(self, node: T) -> list[T]:
        if node not in self.graph:
            return []
        return list(self.graph.neighbors(node))


__all__ = [
    "CallableAdjacency",
    "GoalBoundHeuristic",
    "GraphAdjacency",
    "ZeroHeuristic",
    "unit_cost",
]
