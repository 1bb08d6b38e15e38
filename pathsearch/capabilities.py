"""Contracts the search driver consumes from its caller."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .records import PriorityRecord

T = TypeVar("T")


@runtime_checkable
class Adjacency(Protocol[T]):
    """Describes the implicit graph being searched.

    The driver relaxes an edge from ``current`` to ``neighbor`` by calling
    ``edge_cost(neighbor, current)``; directed graphs must honour that
    argument order.
    """

    def edge_cost(self, a: T, b: T) -> float: ...

    def is_goal(self, node: T) -> bool: ...

    def neighbors(self, node: T) -> Iterable[T]: ...


@runtime_checkable
class HeuristicEstimator(Protocol[T]):
    """Estimate of the remaining cost from a node to an already bound goal."""

    def estimate(self, node: T) -> float: ...


@runtime_checkable
class SearchObserver(Protocol[T]):
    """Receives the best-known map after every record update."""

    def on_update(self, best_known: Mapping[T, PriorityRecord[T]]) -> None: ...


__all__ = ["Adjacency", "HeuristicEstimator", "SearchObserver"]
