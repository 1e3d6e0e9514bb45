# pathviz/app/editor.py
#!/usr/bin/env python3
"""Click-to-paint editing of walls and endpoints."""

import logging
from typing import Optional, Tuple

from pathviz.core.grid import Grid
from pathviz.core.types import Coord

logger = logging.getLogger(__name__)

MODES = ("start", "end", "wall")


def default_endpoints(rows: int, cols: int) -> Tuple[Coord, Coord]:
    """Endpoints on the middle row, a sixth of the width in from either side.

    A 20x30 grid gives (10, 5) and (10, 25).
    """
    mid = rows // 2
    start = (mid, min(cols - 1, cols // 6))
    end = (mid, min(cols - 1, cols - cols // 6))
    if start == end:
        end = (mid, cols - 1) if cols > 1 else ((mid + 1) % rows, 0)
    return start, end


def new_grid(rows: int, cols: int) -> Grid:
    grid = Grid(rows, cols)
    start, end = default_endpoints(rows, cols)
    grid.set_start(*start)
    grid.set_end(*end)
    return grid


class GridEditor:
    def __init__(self, grid: Grid):
        self.grid = grid
        self.mode = "wall"
        self.locked = False  # set while a search is animating
        self._drag_value: Optional[bool] = None

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}")
        self.mode = mode

    def click(self, coord: Coord) -> bool:
        """Apply the current mode at coord; returns True if the grid changed."""
        if self.locked or not self.grid.in_bounds(coord):
            return False
        row, col = coord
        if self.mode == "start":
            if self.grid.start == coord:
                return False
            self.grid.set_start(row, col)
        elif self.mode == "end":
            if self.grid.end == coord:
                return False
            self.grid.set_end(row, col)
        else:
            if coord in (self.grid.start, self.grid.end):
                return False
            self._drag_value = self.grid.toggle_obstacle(row, col)
        return True

    def drag(self, coord: Coord) -> bool:
        """Paint walls while the mouse is held; repeats the value set by the first click."""
        if self.locked or self.mode != "wall" or self._drag_value is None:
            return False
        if not self.grid.in_bounds(coord) or coord in (self.grid.start, self.grid.end):
            return False
        cell = self.grid.cell_at(*coord)
        if cell.obstacle == self._drag_value:
            return False
        self.grid.set_obstacle(coord[0], coord[1], self._drag_value)
        return True

    def release(self) -> None:
        self._drag_value = None

    def full_reset(self, rows: Optional[int] = None, cols: Optional[int] = None) -> Grid:
        if self.locked:
            return self.grid
        rows = self.grid.rows if rows is None else rows
        cols = self.grid.cols if cols is None else cols
        self.grid = new_grid(rows, cols)
        logger.debug("grid reset to %dx%d", rows, cols)
        return self.grid
