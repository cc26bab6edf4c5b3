"""Classic array, searching and graph exercises, with a breadth-first traversal command."""

__version__ = "0.1.0"
__all__ = ["basics", "graph", "array_problems", "searching"]