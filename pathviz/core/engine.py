# pathviz/core/engine.py
#!/usr/bin/env python3
"""
A* over a 4-connected obstacle grid — one expansion per step() for animation.

Lifecycle:
- configure(grid, start, end) -> SearchEngine | InvalidEndpoint
- engine.step() -> StepResult   (idle -> running -> succeeded | exhausted)
- engine.run()  -> SearchResult (drives step() to a terminal state)
- endpoints are re-checked when each run begins; one that became a wall
  since configure() ends the run as "invalid_endpoint" without searching

Ordering rules that keep traces reproducible:
- Neighbors are expanded up, right, down, left.
- Among equal f scores the cell that entered the frontier first wins.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Union

from pathviz.core.frontier import Frontier
from pathviz.core.grid import Grid
from pathviz.core.heuristics import Heuristic, get_heuristic
from pathviz.core.path import reconstruct
from pathviz.core.types import (
    EXHAUSTED,
    IDLE,
    INVALID,
    RUNNING,
    SUCCEEDED,
    Cell,
    Coord,
    InvalidEndpoint,
    SearchResult,
    StepResult,
)

logger = logging.getLogger(__name__)

STEP_COST = 1


@dataclass
class SearchEngine:
    grid: Grid
    start: Coord
    end: Coord
    heuristic: Heuristic
    name: str = "A*"

    # Internal state
    state: str = IDLE
    frontier: Frontier = field(default_factory=Frontier)
    closed: Set[Coord] = field(default_factory=set)
    visited: List[Coord] = field(default_factory=list)   # trace of visited events
    popped_count: int = 0
    _terminal: Optional[StepResult] = field(default=None, repr=False)

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Drop all run state; the next step() starts a fresh search."""
        self.state = IDLE
        self.frontier = Frontier()
        self.closed = set()
        self.visited = []
        self.popped_count = 0
        self._terminal = None

    def _begin(self) -> None:
        self.grid.nodes.reset()
        s = self.grid.nodes[self.start]
        s.record(0, self.heuristic(self.start, self.end), None)
        self.frontier.insert(self.start, s.f)
        self.state = RUNNING
        logger.info("%s search %s -> %s on %dx%d grid",
                    self.name, self.start, self.end, self.grid.rows, self.grid.cols)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion step:
          - Pop the lowest-f node.
          - If goal, reconstruct and finish.
          - Else close it and relax its neighbors with unit edge cost.
        """
        if self._terminal is not None:
            return self._terminal

        if self.state == IDLE:
            for which, coord in (("start", self.start), ("end", self.end)):
                bad = _check_endpoint(self.grid, which, coord)
                if bad is not None:
                    return self._refuse(bad)
            self._begin()

        if self.frontier.is_empty():
            return self._finish(EXHAUSTED)

        u = self.frontier.extract_min()
        self.popped_count += 1

        if u == self.end:
            return self._finish(SUCCEEDED, current=u)

        self.closed.add(u)
        visited = None
        if u != self.start:
            visited = u
            self.visited.append(u)

        nodes = self.grid.nodes
        g_u = nodes[u].g
        opened_now: List[Coord] = []
        for v in self.grid.neighbors(u):
            if v in self.closed:
                continue
            node = nodes[v]
            alt = g_u + STEP_COST
            if node.discovered and alt >= node.g:
                continue
            node.record(alt, self.heuristic(v, self.end), u)
            if v in self.frontier:
                self.frontier.update(v, node.f)
            else:
                self.frontier.insert(v, node.f)
                opened_now.append(v)

        logger.debug("expanded %s g=%d, opened %s", u, g_u, opened_now)
        return StepResult(status=RUNNING, visited=visited, opened=opened_now,
                          current=u, metrics=self._metrics())

    def _finish(self, status: str, current: Optional[Coord] = None) -> StepResult:
        self.state = status
        path = self.path() if status == SUCCEEDED else []
        self._terminal = StepResult(
            status=status,
            current=current,
            path=path,
            metrics=self._metrics(path),
        )
        logger.info("%s search %s after %d pops (%d visited, path %d)",
                    self.name, status, self.popped_count, len(self.visited), len(path))
        return self._terminal

    def _refuse(self, error: InvalidEndpoint) -> StepResult:
        self.state = INVALID
        self._terminal = StepResult(status=INVALID, path=[], error=error,
                                    metrics=self._metrics())
        logger.warning("refusing to search: %s", error)
        return self._terminal

    def run(self) -> SearchResult:
        """Search to completion; a finished engine starts over from scratch."""
        if self.state != IDLE:
            self.reset()
        res = self.step()
        while not res.terminal:
            res = self.step()
        return SearchResult(
            outcome=res.status,
            visited=list(self.visited),
            path=list(res.path or []),
            metrics=res.metrics,
            error=res.error,
        )

    def path(self) -> List[Coord]:
        if self.state != SUCCEEDED:
            raise RuntimeError(f"no path to reconstruct in state {self.state!r}")
        return reconstruct(self.grid.nodes, self.end)

    def open_coords(self) -> List[Coord]:
        return self.frontier.coords()

    # -------------------- metrics --------------------

    def _metrics(self, path: Optional[List[Coord]] = None) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.frontier),
            "closed_count": len(self.closed),
            "visited": len(self.visited),
            "path_len": len(path) if path else 0,
            "total_cost": self.grid.nodes[self.end].g if self.state == SUCCEEDED else None,
        }


def _as_coord(where: Union[Cell, Coord, None]) -> Optional[Coord]:
    if where is None:
        return None
    if isinstance(where, Cell):
        return where.coord
    return (int(where[0]), int(where[1]))


def _check_endpoint(grid: Grid, which: str,
                    coord: Union[Cell, Coord, None]) -> Optional[InvalidEndpoint]:
    coord = _as_coord(coord)
    if coord is None:
        return InvalidEndpoint(which, "unset")
    if not grid.in_bounds(coord):
        return InvalidEndpoint(which, "out_of_bounds", coord)
    if grid.is_obstacle(coord):
        return InvalidEndpoint(which, "obstacle", coord)
    return None


def configure(
    grid: Grid,
    start: Union[Cell, Coord, None] = None,
    end: Union[Cell, Coord, None] = None,
    heuristic: Union[str, Heuristic] = "manhattan",
) -> Union[SearchEngine, InvalidEndpoint]:
    """Validate endpoints and build an engine; no search work happens here.

    start/end take a Cell or a (row, col) pair and default to the endpoints
    stored on the grid.
    """
    start = _as_coord(grid.start if start is None else start)
    end = _as_coord(grid.end if end is None else end)
    for which, coord in (("start", start), ("end", end)):
        bad = _check_endpoint(grid, which, coord)
        if bad is not None:
            logger.warning("refusing to search: %s", bad)
            return bad

    if isinstance(heuristic, str):
        name = "Dijkstra" if heuristic.lower() == "dijkstra" else "A*"
        heuristic = get_heuristic(heuristic)
    else:
        name = "A*"
    return SearchEngine(grid, start, end, heuristic, name=name)


def run(engine: SearchEngine) -> SearchResult:
    return engine.run()


def step(engine: SearchEngine) -> StepResult:
    return engine.step()
