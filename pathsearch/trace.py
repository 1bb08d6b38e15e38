"""Observers for watching a search unfold."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .records import PriorityRecord


def _format_cost(value: float) -> str:
    return f"{value:g}"


def render_records(
    best_known: Mapping[Any, PriorityRecord[Any]], *, title: str = "Best known"
) -> Table:
    """Render a best-known map as a table, highest priority first."""

    table = Table(title=title)
    table.add_column("node")
    table.add_column("parent")
    table.add_column("g", justify="right")
    table.add_column("h", justify="right")
    table.add_column("f", justify="right")

    ordered = sorted(
        best_known.values(),
        key=lambda record: (record.total_cost, record.cost_from_start),
    )
    for record in ordered:
        parent = escape(repr(record.parent)) if record.has_parent else "[dim]-[/dim]"
        table.add_row(
            escape(repr(record.node)),
            parent,
            _format_cost(record.cost_from_start),
            _format_cost(record.heuristic_to_goal),
            _format_cost(record.total_cost),
        )
    return table


class SnapshotRecorder:
    """Keeps a frozen copy of the best-known map after every update."""

    def __init__(self) -> None:
        self.snapshots: list[Mapping[Any, PriorityRecord[Any]]] = []

    def on_update(self, best_known: Mapping[Any, PriorityRecord[Any]]) -> None:
        self.snapshots.append(MappingProxyType(dict(best_known)))

    @property
    def latest(self) -> Mapping[Any, PriorityRecord[Any]] | None:
        return self.snapshots[-1] if self.snapshots else None

    def clear(self) -> None:
        self.snapshots.clear()

    def __len__(self) -> int:
        return len(self.snapshots)


class ConsoleTracer:
    """Prints each update to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._updates = 0

    def on_update(self, best_known: Mapping[Any, PriorityRecord[Any]]) -> None:
        self._updates += 1
        self.console.print(render_records(best_known, title=f"Update {self._updates}"))


__all__ = ["ConsoleTracer", "SnapshotRecorder", "render_records"]
