from pathsearch import astar

width, height = 10, 10
start = (0, 0)
goal = (5, 2)  # keep within demo bounds

blocked = {(1, 0), (2, 1), (3, 1)}


def passable(cell) -> bool:
    return cell not in blocked


def neighbors(cell):
    x, y = cell
    for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
        if 0 <= x + dx < width and 0 <= y + dy < height:
            yield (x + dx, y + dy)


def manhattan(a, b) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


if __name__ == "__main__":
    path, total_cost = astar(start, goal, neighbors, manhattan, passable=passable)
    print("path:", path)
    print("cost:", total_cost)
