"""Domain ports - construction abstractions implemented by maze families."""

from .maze_builder_port import MazeBuilder
from .maze_factory_port import MazeFactory

__all__ = ["MazeBuilder", "MazeFactory"]
