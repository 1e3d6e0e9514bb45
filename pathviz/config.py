# pathviz/config.py
#!/usr/bin/env python3
"""
Viewer settings.

Resolution order (last wins):
- defaults below
- ENV:  PATHVIZ_ROWS, PATHVIZ_COLS, PATHVIZ_SPEED, PATHVIZ_HEURISTIC,
        PATHVIZ_MAP, PATHVIZ_LOG_LEVEL
- CLI:  --rows=20 --cols=30 --speed=medium --heuristic=manhattan
        --map=maze --log-level=INFO
"""

import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

from pathviz.core.heuristics import HEURISTICS

# delay in ms between visited steps; path cells play at a third of that
SPEEDS: Dict[str, int] = {"fast": 10, "medium": 50, "slow": 100}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ENV_PREFIX = "PATHVIZ_"
KEYS = ("rows", "cols", "speed", "heuristic", "map", "log_level")


@dataclass
class ViewerConfig:
    rows: int = 20
    cols: int = 30
    speed: str = "medium"
    heuristic: str = "manhattan"
    map: Optional[str] = None
    log_level: str = "INFO"

    @property
    def delay_ms(self) -> int:
        return SPEEDS[self.speed]


def _collect(environ: Dict[str, str], argv: List[str]) -> Dict[str, str]:
    raw: Dict[str, str] = {}
    for key in KEYS:
        val = environ.get(ENV_PREFIX + key.upper())
        if val:
            raw[key] = val
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        key, val = arg[2:].split("=", 1)
        key = key.replace("-", "_").lower()
        if key in KEYS:
            raw[key] = val
    return raw


def _positive_int(key: str, val: str) -> int:
    try:
        n = int(val)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {val!r}") from None
    if n <= 0:
        raise ValueError(f"{key} must be positive, got {n}")
    return n


def resolve_config(environ: Optional[Dict[str, str]] = None,
                   argv: Optional[List[str]] = None) -> ViewerConfig:
    raw = _collect(os.environ if environ is None else environ,
                   sys.argv[1:] if argv is None else argv)
    cfg = ViewerConfig()

    if "rows" in raw:
        cfg.rows = _positive_int("rows", raw["rows"])
    if "cols" in raw:
        cfg.cols = _positive_int("cols", raw["cols"])
    if "speed" in raw:
        speed = raw["speed"].lower()
        if speed not in SPEEDS:
            raise ValueError(f"speed must be one of {sorted(SPEEDS)}, got {raw['speed']!r}")
        cfg.speed = speed
    if "heuristic" in raw:
        heuristic = raw["heuristic"].lower()
        if heuristic not in HEURISTICS:
            raise ValueError(f"heuristic must be one of {sorted(HEURISTICS)}, got {raw['heuristic']!r}")
        cfg.heuristic = heuristic
    if "map" in raw:
        cfg.map = raw["map"]
    if "log_level" in raw:
        level = raw["log_level"].upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {raw['log_level']!r}")
        cfg.log_level = level
    return cfg
