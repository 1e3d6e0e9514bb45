"""Grid pathfinding visualizer: an incremental A* engine and a pygame viewer."""

__version__ = "0.1.0"
