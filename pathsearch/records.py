"""Per-node bookkeeping for the search driver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Literal, TypeVar

T = TypeVar("T")


class _NoParent(Enum):
    """Marker for the start node, which has no predecessor."""

    NO_PARENT = "no-parent"

    def __repr__(self) -> str:
        return "NO_PARENT"


NO_PARENT = _NoParent.NO_PARENT


@dataclass(frozen=True, slots=True)
class PriorityRecord(Generic[T]):
    """Best known way of reaching ``node`` during a single search.

    ``heuristic_to_goal`` is taken once when the record is created and never
    refreshed.
    """

    node: T
    parent: T | Literal[_NoParent.NO_PARENT]
    cost_from_start: float
    heuristic_to_goal: float

    @property
    def total_cost(self) -> float:
        return self.cost_from_start + self.heuristic_to_goal

    @property
    def has_parent(self) -> bool:
        return self.parent is not NO_PARENT

    def outranks(self, other: PriorityRecord[T]) -> bool:
        """Return ``True`` if this record should leave the open list first.

        Lower ``total_cost`` wins; equal totals fall back to the lower
        ``cost_from_start``.
        """

        own_total = self.total_cost
        other_total = other.total_cost
        if own_total != other_total:
            return own_total < other_total
        return self.cost_from_start < other.cost_from_start


def record_outranks(a: PriorityRecord[T], b: PriorityRecord[T]) -> bool:
    """Ordering predicate used by the open list."""

    return a.outranks(b)


def start_record(node: T, heuristic: float) -> PriorityRecord[T]:
    return PriorityRecord(node, NO_PARENT, 0.0, heuristic)


__all__ = ["NO_PARENT", "PriorityRecord", "record_outranks", "start_record"]
