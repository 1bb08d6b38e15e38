"""Generic A* search over implicit graphs."""

__version__ = "0.1.0"

from .errors import (
    EmptyContainerError,
    InvalidCostError,
    MalformedPathError,
    MissingRecordError,
    NoPathError,
    SearchCancelledError,
    SearchError,
)
from .heap import PriorityHeap
from .records import NO_PARENT, PriorityRecord, record_outranks
from .capabilities import Adjacency, HeuristicEstimator, SearchObserver
from .config import SearchSettings, load_settings
from .adapters import CallableAdjacency, GoalBoundHeuristic, GraphAdjacency, ZeroHeuristic
from .astar import AStar, SearchResult, SearchStats, astar, path_cost
from .trace import ConsoleTracer, SnapshotRecorder, render_records

__all__ = [
    "__version__",
    "AStar",
    "Adjacency",
    "CallableAdjacency",
    "ConsoleTracer",
    "EmptyContainerError",
    "GoalBoundHeuristic",
    "GraphAdjacency",
    "HeuristicEstimator",
    "InvalidCostError",
    "MalformedPathError",
    "MissingRecordError",
    "NO_PARENT",
    "NoPathError",
    "PriorityHeap",
    "PriorityRecord",
    "SearchCancelledError",
    "SearchError",
    "SearchObserver",
    "SearchResult",
    "SearchSettings",
    "SearchStats",
    "SnapshotRecorder",
    "ZeroHeuristic",
    "astar",
    "load_settings",
    "path_cost",
    "record_outranks",
    "render_records",
]
