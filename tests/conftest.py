# tests/conftest.py
import os
from collections import deque
from typing import List, Optional

import pytest

from pathviz.core.grid import Grid

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def make_grid(rows: List[str]) -> Grid:
    """Build a grid from text: '#' wall, 'S' start, 'E' end, anything else open."""
    grid = Grid(len(rows), len(rows[0]))
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch == "#":
                grid.set_obstacle(r, c, True)
            elif ch == "S":
                grid.set_start(r, c)
            elif ch == "E":
                grid.set_end(r, c)
    return grid


def bfs_distance(grid: Grid, start, end) -> Optional[int]:
    """Edge count of the shortest 4-connected path, None if unreachable."""
    seen = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == end:
            return seen[cur]
        for n in grid.neighbors(cur):
            if n not in seen:
                seen[n] = seen[cur] + 1
                queue.append(n)
    return None


@pytest.fixture
def empty_5x5():
    grid = Grid(5, 5)
    grid.set_start(0, 0)
    grid.set_end(4, 4)
    return grid


@pytest.fixture
def walled_5x5():
    return make_grid([
        "S....",
        ".....",
        "#####",
        ".....",
        "....E",
    ])
