"""A* search over implicit graphs.

The driver keeps, per call, a best-known map of :class:`PriorityRecord`
objects, a visited set of expanded nodes and a :class:`PriorityHeap` open
list. Expansion is not final: a node whose cost improves after it was
expanded is removed from the visited set and expanded again.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Generic, Hashable, Iterable, Mapping, Sequence, TypeVar

from .adapters import CallableAdjacency, GoalBoundHeuristic, unit_cost
from .capabilities import Adjacency, HeuristicEstimator, SearchObserver
from .config import SearchSettings
from .errors import (
    InvalidCostError,
    MalformedPathError,
    MissingRecordError,
    NoPathError,
    SearchCancelledError,
)
from .heap import PriorityHeap
from .records import NO_PARENT, PriorityRecord, record_outranks, start_record

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


@dataclass
class SearchStats:
    """Counters collected while a single search runs."""

    expansions: int = 0
    pushes: int = 0
    stale_pops: int = 0
    reopenings: int = 0
    skipped_relaxations: int = 0


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    path: tuple[T, ...]
    cost: float
    stats: SearchStats = field(default_factory=SearchStats)


class AStar(Generic[T]):
    """Best-first search driver.

    ``estimator`` must already be bound to the goal; the driver only ever
    recognises a goal through ``adjacency.is_goal``.
    """

    def __init__(
        self,
        adjacency: Adjacency[T],
        estimator: HeuristicEstimator[T],
        observer: SearchObserver[T] | None = None,
        *,
        settings: SearchSettings | None = None,
    ) -> None:
        self.adjacency = adjacency
        self.estimator = estimator
        self.observer = observer
        self.settings = settings or SearchSettings()

    # --------- Public API ---------

    def search_path(self, start: T, goal: T) -> list[T]:
        """Return the nodes of a least-cost path from ``start`` to a goal."""

        return list(self.search(start, goal).path)

    def search(
        self,
        start: T,
        goal: T,
        *,
        should_cancel: Callable[[], bool] | None = None,
    ) -> SearchResult[T]:
        """Run the search and return the path with its cost and counters.

        Raises:
            NoPathError: the open list ran dry before a goal was reached.
            MalformedPathError: the reconstructed path is inconsistent.
            MissingRecordError: a parent link points at an unknown node.
            SearchCancelledError: ``should_cancel`` returned ``True`` or the
                configured expansion limit was hit.
            InvalidCostError: a negative or NaN cost was reported.
        """

        logger.debug("searching path %r -> %r", start, goal)
        estimates: dict[T, float] = {}
        stats = SearchStats()
        max_expansions = self.settings.max_expansions

        best_known: dict[T, PriorityRecord[T]] = {
            start: start_record(start, self._estimate(start, estimates))
        }
        snapshot: Mapping[T, PriorityRecord[T]] = MappingProxyType(best_known)
        open_list: PriorityHeap[PriorityRecord[T]] = PriorityHeap(
            record_outranks, items=[best_known[start]]
        )
        stats.pushes += 1
        visited: set[T] = set()

        current = start
        reached_goal = False
        while open_list:
            if should_cancel is not None and should_cancel():
                raise self._cancelled("search cancelled by caller", stats)

            current = open_list.pop().node
            if current in visited:
                stats.stale_pops += 1
                continue

            if self.adjacency.is_goal(current):
                reached_goal = True
                break

            if max_expansions is not None and stats.expansions >= max_expansions:
                raise self._cancelled(
                    f"expansion limit of {max_expansions} reached", stats
                )

            neighbors = self.adjacency.neighbors(current)
            record = best_known[current]
            visited.add(current)
            stats.expansions += 1

            for neighbor in neighbors:
                # Only the immediate back-edge is filtered, not other ancestors.
                if record.parent is not NO_PARENT and neighbor == record.parent:
                    continue

                step = self._checked(
                    "edge cost", self.adjacency.edge_cost(neighbor, current), neighbor, current
                )
                new_cost = record.cost_from_start + step

                known = best_known.get(neighbor)
                if known is not None:
                    if known.cost_from_start <= new_cost:
                        stats.skipped_relaxations += 1
                        continue
                    if neighbor in visited:
                        visited.discard(neighbor)
                        stats.reopenings += 1
                        logger.debug(
                            "re-opening %r: cost %s -> %s",
                            neighbor,
                            known.cost_from_start,
                            new_cost,
                        )
                    del best_known[neighbor]

                updated = PriorityRecord(
                    neighbor, current, new_cost, self._estimate(neighbor, estimates)
                )
                best_known[neighbor] = updated
                open_list.push(updated)
                stats.pushes += 1

                if self.observer is not None:
                    if self.settings.trace_updates:
                        logger.debug("update %r via %r, g=%s", neighbor, current, new_cost)
                    self.observer.on_update(snapshot)

        path = self.follow(current, best_known)
        if path[0] != start:
            logger.info("path %r does not begin at start %r", path, start)
            raise MalformedPathError("path does not begin at the start node", path)
        if not reached_goal:
            logger.info(
                "no path from %r to %r after %d expansions",
                start,
                goal,
                stats.expansions,
            )
            raise NoPathError(start, goal, path)
        if not self.adjacency.is_goal(path[-1]):
            logger.info("path %r does not end at a goal", path)
            raise MalformedPathError("path does not end at a goal node", path)

        cost = best_known[current].cost_from_start
        logger.debug(
            "found path of %d nodes, cost %s, %d expansions",
            len(path),
            cost,
            stats.expansions,
        )
        return SearchResult(tuple(path), cost, stats)

    @staticmethod
    def follow(target: T, best_known: Mapping[T, PriorityRecord[T]]) -> list[T]:
        """Walk parent links from ``target`` back to the start, start first."""

        path: list[T] = []
        node = target
        while True:
            path.append(node)
            try:
                record = best_known[node]
            except KeyError:
                raise MissingRecordError(node) from None
            if record.parent is NO_PARENT:
                break
            if len(path) > len(best_known):
                raise MalformedPathError("parent links form a cycle", path)
            node = record.parent
        path.reverse()
        return path

    # --------- Internal helpers ---------

    def _estimate(self, node: T, estimates: dict[T, float]) -> float:
        if node not in estimates:
            estimates[node] = self._checked(
                "heuristic", self.estimator.estimate(node), node
            )
        return estimates[node]

    def _checked(self, kind: str, value: float, *nodes: T) -> float:
        value = float(value)
        if self.settings.validate_costs and (math.isnan(value) or value < 0):
            raise InvalidCostError(kind, value, *nodes)
        return value

    def _cancelled(self, reason: str, stats: SearchStats) -> SearchCancelledError:
        logger.info("%s after %d expansions", reason, stats.expansions)
        return SearchCancelledError(reason, stats)


def path_cost(adjacency: Adjacency[T], path: Sequence[T]) -> float:
    """Return the accumulated edge cost along ``path``."""

    if len(path) < 2:
        return 0.0
    return sum(
        float(adjacency.edge_cost(destination, origin))
        for origin, destination in zip(path, path[1:])
    )


def astar(
    start: T,
    goal: T,
    neighbors: Callable[[T], Iterable[T]],
    heuristic: Callable[[T, T], float],
    *,
    cost: Callable[[T, T], float] = unit_cost,
    passable: Callable[[T], bool] = lambda node: True,
    is_goal: Callable[[T], bool] | None = None,
    observer: SearchObserver[T] | None = None,
    settings: SearchSettings | None = None,
) -> tuple[list[T] | None, float]:
    """Generic A* over plain callables.

    ``cost(origin, destination)`` prices a step and ``heuristic(node, goal)``
    estimates the rest. Returns ``(path, total_cost)`` or ``(None, inf)`` when
    no path exists.
    """

    adjacency: CallableAdjacency[T] = CallableAdjacency(
        neighbors,
        is_goal if is_goal is not None else (lambda node: node == goal),
        cost=lambda neighbor, current: cost(current, neighbor),
        passable=passable,
    )
    driver = AStar(adjacency, GoalBoundHeuristic(heuristic, goal), observer, settings=settings)
    try:
        result = driver.search(start, goal)
    except NoPathError:
        return None, math.inf
    return list(result.path), result.cost


__all__ = ["AStar", "SearchResult", "SearchStats", "astar", "path_cost"]
