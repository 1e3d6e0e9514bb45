# pathviz/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

Coord = Tuple[int, int]  # (row, col)

# Engine states / step statuses
IDLE = "idle"
RUNNING = "running"
SUCCEEDED = "succeeded"
EXHAUSTED = "exhausted"
INVALID = "invalid_endpoint"   # an endpoint became unsearchable after configure()


class OutOfBounds(IndexError):
    """Raised when a coordinate falls outside the grid extent."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"({row}, {col}) is outside a {rows}x{cols} grid")
        self.row = row
        self.col = col


@dataclass
class Cell:
    row: int
    col: int
    obstacle: bool = field(default=False, compare=False)

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def __hash__(self) -> int:
        return hash((self.row, self.col))


@dataclass(frozen=True)
class InvalidEndpoint:
    """Returned by configure() (or carried by a terminal step) when an endpoint
    can't be searched from/to."""
    which: str                    # "start" | "end"
    reason: str                   # "unset" | "out_of_bounds" | "obstacle"
    coord: Optional[Coord] = None

    def __str__(self) -> str:
        where = f" at {self.coord}" if self.coord is not None else ""
        return f"invalid {self.which}{where}: {self.reason}"


@dataclass
class StepResult:
    status: str                   # "running" | "succeeded" | "exhausted" | "invalid_endpoint"
    visited: Optional[Coord] = None
    opened: List[Coord] = field(default_factory=list)
    current: Optional[Coord] = None
    path: Optional[List[Coord]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
    error: Optional[InvalidEndpoint] = None

    @property
    def terminal(self) -> bool:
        return self.status in (SUCCEEDED, EXHAUSTED, INVALID)


@dataclass
class SearchResult:
    outcome: str                  # "succeeded" | "exhausted" | "invalid_endpoint"
    visited: List[Coord] = field(default_factory=list)
    path: List[Coord] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
    error: Optional[InvalidEndpoint] = None

    @property
    def found(self) -> bool:
        return self.outcome == SUCCEEDED
