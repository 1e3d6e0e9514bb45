# pathviz/core/nodes.py
#!/usr/bin/env python3
"""
Per-cell search bookkeeping, kept apart from the grid's static cells.

One SearchNode per cell, stored in a flat table indexed by (row, col).
reset() rewinds every node to the undiscovered state in a single pass, so
the table can be reused run after run without reallocating.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from pathviz.core.types import Coord


@dataclass
class SearchNode:
    row: int
    col: int
    g: int = 0                          # cost from start
    h: float = 0                        # heuristic to goal
    f: float = 0                        # g + h
    predecessor: Optional[Coord] = None
    discovered: bool = False

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def reset(self) -> None:
        self.g = 0; self.h = 0; self.f = 0
        self.predecessor = None
        self.discovered = False

    def record(self, g: int, h: float, predecessor: Optional[Coord]) -> None:
        """Store a (better) route to this node."""
        self.g = g
        self.h = h
        self.f = g + h
        self.predecessor = predecessor
        self.discovered = True


class NodeTable:
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._nodes: List[SearchNode] = [
            SearchNode(r, c) for r in range(rows) for c in range(cols)
        ]

    def __getitem__(self, coord: Coord) -> SearchNode:
        r, c = coord
        return self._nodes[r * self.cols + c]

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def reset(self) -> None:
        for node in self._nodes:
            node.reset()

    def discovered(self) -> List[Coord]:
        return [n.coord for n in self._nodes if n.discovered]
