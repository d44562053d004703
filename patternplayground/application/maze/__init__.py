"""Maze application services."""

from .service import MazeGame

__all__ = ["MazeGame"]
