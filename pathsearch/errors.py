"""Exceptions raised by the heap and the search driver."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .astar import SearchStats


class SearchError(Exception):
    """Base class for every error raised by :mod:`pathsearch`."""


class EmptyContainerError(SearchError, IndexError):
    """Raised when an element is requested from an empty heap."""

    def __init__(self, operation: str = "pop") -> None:
        super().__init__(f"{operation} from an empty priority heap")
        self.operation = operation


class MissingRecordError(SearchError, KeyError):
    """Raised when path reconstruction meets a node without a record."""

    def __init__(self, node: Any) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"no record for node {self.node!r} while following parent links"


class MalformedPathError(SearchError, ValueError):
    """Raised when a reconstructed path does not run from start to a goal."""

    def __init__(self, message: str, path: list[Any] | None = None) -> None:
        super().__init__(message)
        self.path = list(path or [])


class NoPathError(MalformedPathError):
    """Raised when the open list is exhausted before any goal is reached."""

    def __init__(self, start: Any, goal: Any, path: list[Any] | None = None) -> None:
        super().__init__(f"no path from {start!r} to {goal!r}", path)
        self.start = start
        self.goal = goal


class SearchCancelledError(SearchError):
    """Raised when a search is stopped before it could finish."""

    def __init__(self, reason: str, stats: SearchStats) -> None:
        super().__init__(reason)
        self.reason = reason
        self.stats = stats


class InvalidCostError(SearchError, ValueError):
    """Raised when a capability reports a negative or NaN cost."""

    def __init__(self, kind: str, value: float, *nodes: Any) -> None:
        where = ", ".join(repr(node) for node in nodes)
        super().__init__(f"invalid {kind} {value!r} for {where}")
        self.kind = kind
        self.value = value
        self.nodes = nodes


__all__ = [
    "EmptyContainerError",
    "InvalidCostError",
    "MalformedPathError",
    "MissingRecordError",
    "NoPathError",
    "SearchCancelledError",
    "SearchError",
]
