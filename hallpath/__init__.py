"""Shortest walking routes between rooms on a school campus."""

__version__ = "0.1.0"
__all__ = ["campus", "course", "graph"]