# pathviz/core/frontier.py
#!/usr/bin/env python3
"""
Open set for the A* loop.

Binary heap of (f, seq, coord) entries. seq is handed out once per cell on
its first insert and kept across updates, so among equal scores the cell that
entered the frontier first is always extracted first. Updates push a fresh
entry and leave the old one in the heap as stale; stale entries are skipped
on extraction.
"""

import heapq
from typing import Dict, List, Tuple

from pathviz.core.types import Coord


class Frontier:
    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Coord]] = []
        self._live: Dict[Coord, Tuple[float, int]] = {}   # coord -> (f, seq)
        self._seq = 0  # monotonic counter for insertion order

    def _bump(self) -> int:
        self._seq += 1
        return self._seq

    def insert(self, coord: Coord, f: float) -> None:
        if coord in self._live:
            raise ValueError(f"{coord} is already in the frontier")
        seq = self._bump()
        self._live[coord] = (f, seq)
        heapq.heappush(self._heap, (f, seq, coord))

    def update(self, coord: Coord, f: float) -> None:
        """Re-score an entry in place; insertion rank is preserved."""
        _, seq = self._live[coord]
        self._live[coord] = (f, seq)
        heapq.heappush(self._heap, (f, seq, coord))

    def extract_min(self) -> Coord:
        while self._heap:
            f, seq, coord = heapq.heappop(self._heap)
            if self._live.get(coord) == (f, seq):
                del self._live[coord]
                return coord
        raise IndexError("extract_min from an empty frontier")

    def contains(self, coord: Coord) -> bool:
        return coord in self._live

    __contains__ = contains

    def is_empty(self) -> bool:
        return not self._live

    def __len__(self) -> int:
        return len(self._live)

    def coords(self) -> List[Coord]:
        return list(self._live)
