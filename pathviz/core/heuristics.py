# pathviz/core/heuristics.py
#!/usr/bin/env python3
"""
Distance estimates between two grid coordinates.

Everything here is admissible for 4-connected unit-cost moves (none of them
ever exceeds the Manhattan distance), so A* stays optimal with any of them.
"""

from math import hypot
from typing import Callable, Dict

from pathviz.core.types import Coord

Heuristic = Callable[[Coord, Coord], float]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Coord, b: Coord) -> float:
    return hypot(a[0] - b[0], a[1] - b[1])


def chebyshev(a: Coord, b: Coord) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def zero(a: Coord, b: Coord) -> int:
    """No estimate at all: A* degrades to Dijkstra."""
    return 0


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "chebyshev": chebyshev,
    "dijkstra": zero,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        raise KeyError(f"unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}") from None
