# pathviz/core/grid.py
#!/usr/bin/env python3
"""
Grid model: a fixed rows x cols matrix of cells with obstacle flags.

The grid also owns the SearchNode table used by the engine, so search state
lives next to (but separate from) the static cell data.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pathviz.core.nodes import NodeTable
from pathviz.core.types import Cell, Coord, OutOfBounds

# up, right, down, left
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class Grid:
    rows: int
    cols: int
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    cells: List[List[Cell]] = field(init=False, repr=False)   # [row][col]
    nodes: NodeTable = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        self.cells = [[Cell(r, c) for c in range(self.cols)] for r in range(self.rows)]
        self.nodes = NodeTable(self.rows, self.cols)

    # -------------------- geometry --------------------

    def dimensions(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds((row, col)):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return self.cells[row][col]

    def is_obstacle(self, coord: Coord) -> bool:
        return self.cell_at(*coord).obstacle

    def neighbors(self, coord: Coord) -> List[Coord]:
        """In-bounds, non-obstacle neighbors in up/right/down/left order."""
        r, c = coord
        out: List[Coord] = []
        for dr, dc in DIRECTIONS:
            n = (r + dr, c + dc)
            if self.in_bounds(n) and not self.cells[n[0]][n[1]].obstacle:
                out.append(n)
        return out

    # -------------------- editing --------------------

    def _is_endpoint(self, coord: Coord) -> bool:
        return coord == self.start or coord == self.end

    def set_obstacle(self, row: int, col: int, flag: bool) -> None:
        cell = self.cell_at(row, col)
        if self._is_endpoint((row, col)):
            return
        cell.obstacle = bool(flag)

    def toggle_obstacle(self, row: int, col: int) -> bool:
        """Flip a wall; returns the new flag (endpoints stay open)."""
        cell = self.cell_at(row, col)
        if not self._is_endpoint((row, col)):
            cell.obstacle = not cell.obstacle
        return cell.obstacle

    def set_start(self, row: int, col: int) -> None:
        """Move the start; it may share a cell with the end (a one-cell path)."""
        self.cell_at(row, col).obstacle = False
        self.start = (row, col)

    def set_end(self, row: int, col: int) -> None:
        self.cell_at(row, col).obstacle = False
        self.end = (row, col)

    def clear_obstacles(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.obstacle = False

    def obstacles(self) -> List[Coord]:
        return [cell.coord for row in self.cells for cell in row if cell.obstacle]

    # -------------------- loading --------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grid":
        cells = data.get("cells")
        rows = int(data.get("rows", len(cells) if cells else 0))
        cols = int(data.get("cols", len(cells[0]) if cells else 0))
        grid = cls(rows, cols)

        if cells is not None:
            if len(cells) != rows or any(len(r) != cols for r in cells):
                raise ValueError("cells size mismatch")
            for r, line in enumerate(cells):
                for c, v in enumerate(line):
                    grid.cells[r][c].obstacle = v == 1
        for r, c in data.get("walls", []):
            grid.cell_at(int(r), int(c)).obstacle = True

        # endpoints last so they clear any wall painted under them
        if data.get("start") is not None:
            grid.set_start(*(int(v) for v in data["start"]))
        if data.get("end") is not None:
            grid.set_end(*(int(v) for v in data["end"]))
        return grid


def load_map(path: Path) -> Grid:
    with open(path, "r") as f:
        data = json.load(f)
    try:
        return Grid.from_dict(data)
    except OutOfBounds as ex:
        raise ValueError(f"{path}: {ex}") from ex


MAP_DIR = Path(__file__).resolve().parents[1] / "maps"


def bundled_maps() -> Dict[str, Path]:
    return {p.stem: p for p in sorted(MAP_DIR.glob("*.json"))}
