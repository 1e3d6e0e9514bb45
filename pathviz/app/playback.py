# pathviz/app/playback.py
#!/usr/bin/env python3
"""
Timed playback of a search for the viewer.

The engine itself has no notion of time. Playback feeds it wall-clock
milliseconds and turns the resulting steps into paint events:
- searching: one "visited" cell per delay
- tracing:   one path cell per delay / 3, endpoints excluded
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pathviz.core.engine import SearchEngine, configure
from pathviz.core.grid import Grid
from pathviz.core.heuristics import Heuristic
from pathviz.core.types import EXHAUSTED, INVALID, SUCCEEDED, Coord, InvalidEndpoint

logger = logging.getLogger(__name__)

# phases
IDLE = "idle"
SEARCHING = "searching"
TRACING = "tracing"
DONE = "done"
NO_PATH = "no_path"


@dataclass
class PlaybackEvent:
    kind: str                      # "visited" | "path" | "succeeded" | "exhausted" | "invalid"
    coord: Optional[Coord] = None


class Playback:
    def __init__(self, delay_ms: int = 50):
        self.delay_ms = delay_ms
        self.engine: Optional[SearchEngine] = None
        self.phase = IDLE
        self.error: Optional[InvalidEndpoint] = None
        self.visited: List[Coord] = []
        self.path: List[Coord] = []          # full path once found
        self.path_shown: List[Coord] = []    # revealed so far
        self.metrics: Dict[str, Any] = {}
        self._pending: List[Coord] = []
        self._clock = 0.0

    # -------------------- lifecycle --------------------

    def start(self, grid: Grid, heuristic: Union[str, Heuristic] = "manhattan") -> bool:
        """Configure a new search; False (and self.error) if the endpoints are bad."""
        self.clear()
        res = configure(grid, heuristic=heuristic)
        if isinstance(res, InvalidEndpoint):
            self.error = res
            return False
        self.engine = res
        self.phase = SEARCHING
        return True

    def clear(self) -> None:
        self.engine = None
        self.phase = IDLE
        self.error = None
        self.visited = []
        self.path = []
        self.path_shown = []
        self.metrics = {}
        self._pending = []
        self._clock = 0.0

    @property
    def active(self) -> bool:
        return self.phase in (SEARCHING, TRACING)

    @property
    def finished(self) -> bool:
        return self.phase in (DONE, NO_PATH)

    def open_cells(self) -> List[Coord]:
        return self.engine.open_coords() if self.engine and self.phase == SEARCHING else []

    # -------------------- ticking --------------------

    def _interval(self) -> float:
        return self.delay_ms if self.phase == SEARCHING else self.delay_ms / 3

    def advance(self, elapsed_ms: float) -> List[PlaybackEvent]:
        """Spend elapsed_ms of wall-clock time; returns the events that became due."""
        if not self.active:
            return []
        self._clock += elapsed_ms
        events: List[PlaybackEvent] = []
        while self.active and self._clock >= self._interval():
            self._clock -= self._interval()
            events.append(self.tick())
        return events

    def tick(self) -> PlaybackEvent:
        """Produce the next paint event regardless of time."""
        if self.phase == SEARCHING:
            return self._search_tick()
        if self.phase == TRACING:
            return self._trace_tick()
        raise RuntimeError(f"nothing to play in phase {self.phase!r}")

    def _search_tick(self) -> PlaybackEvent:
        # the start cell's expansion paints nothing, so it doesn't cost a tick
        while True:
            res = self.engine.step()
            self.metrics = res.metrics
            if res.visited is not None:
                self.visited.append(res.visited)
                return PlaybackEvent("visited", res.visited)
            if res.status == SUCCEEDED:
                self.path = list(res.path)
                self._pending = self.path[1:-1]
                self.phase = TRACING
                if not self._pending:
                    self.phase = DONE
                return PlaybackEvent("succeeded", res.current)
            if res.status == EXHAUSTED:
                self.phase = NO_PATH
                logger.info("no path found")
                return PlaybackEvent("exhausted")
            if res.status == INVALID:
                self.error = res.error
                self.engine = None
                self.phase = IDLE
                return PlaybackEvent("invalid")

    def _trace_tick(self) -> PlaybackEvent:
        coord = self._pending.pop(0)
        self.path_shown.append(coord)
        if not self._pending:
            self.phase = DONE
        return PlaybackEvent("path", coord)

    def finish(self) -> None:
        """Skip the animation and jump to the final picture."""
        while self.active:
            self.tick()
