# pathviz/core/path.py
#!/usr/bin/env python3
from typing import List

from pathviz.core.nodes import NodeTable
from pathviz.core.types import Coord


def reconstruct(nodes: NodeTable, goal: Coord) -> List[Coord]:
    """Walk predecessor links back from goal, returned in start -> goal order."""
    path: List[Coord] = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = nodes[cur].predecessor
    path.reverse()
    return path
