from pathviz.core.engine import SearchEngine, configure, run, step
from pathviz.core.grid import Grid, load_map
from pathviz.core.types import (
    EXHAUSTED,
    IDLE,
    INVALID,
    RUNNING,
    SUCCEEDED,
    Cell,
    Coord,
    InvalidEndpoint,
    OutOfBounds,
    SearchResult,
    StepResult,
)

__all__ = [
    "SearchEngine",
    "configure",
    "run",
    "step",
    "Grid",
    "load_map",
    "Cell",
    "Coord",
    "InvalidEndpoint",
    "OutOfBounds",
    "SearchResult",
    "StepResult",
    "IDLE",
    "RUNNING",
    "SUCCEEDED",
    "EXHAUSTED",
    "INVALID",
]
