import math

from pathsearch import SearchSettings, astar
from pathsearch.trace import SnapshotRecorder

WIDTH = HEIGHT = 5


def grid_neighbors(cell):
    x, y = cell
    for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
        nx_, ny_ = x + dx, y + dy
        if 0 <= nx_ < WIDTH and 0 <= ny_ < HEIGHT:
            yield (nx_, ny_)


def manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def test_astar_straight_line():
    start = (0, 0)
    goal = (3, 0)
    path, cost = astar(start, goal, grid_neighbors, manhattan)
    assert path is not None
    assert path[0] == start and path[-1] == goal
    assert cost == 3


def test_astar_blocked_detour():
    start = (0, 0)
    goal = (2, 0)
    blocked = {(1, 0)}

    def passable(cell) -> bool:
        return cell not in blocked

    path, cost = astar(start, goal, grid_neighbors, manhattan, passable=passable)
    assert path is not None
    assert path[0] == start and path[-1] == goal
    assert (1, 0) not in path
    assert cost == 4


def test_astar_cost_is_called_origin_first():
    steps = []

    def cost(origin, destination):
        steps.append((origin, destination))
        return 2.0 if destination[1] == 0 else 1.0

    path, total = astar((0, 0), (0, 1), grid_neighbors, manhattan, cost=cost)
    assert path == [(0, 0), (0, 1)]
    assert total == 1.0
    assert ((0, 0), (0, 1)) in steps


def test_astar_unreachable_goal_returns_none():
    walls = {(1, y) for y in range(HEIGHT)}
    path, cost = astar(
        (0, 0), (4, 4), grid_neighbors, manhattan, passable=lambda c: c not in walls
    )
    assert path is None
    assert math.isinf(cost)


def test_astar_accepts_custom_goal_predicate_and_observer():
    recorder = SnapshotRecorder()
    path, cost = astar(
        (0, 0),
        (4, 4),
        grid_neighbors,
        lambda a, b: 0.0,
        is_goal=lambda cell: cell[0] == 2,
        observer=recorder,
        settings=SearchSettings(max_expansions=100),
    )
    assert path is not None
    assert path[-1][0] == 2
    assert cost == 2
    assert len(recorder) > 0
