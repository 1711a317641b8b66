"""Grid pathfinding visualizer: paint walls, place start/finish, watch the search."""

__version__ = "0.1.0"
