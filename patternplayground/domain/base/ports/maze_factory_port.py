"""Domain port for maze element creation (factory shape)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patternplayground.domain.maze.map_sites import Door, Room, Wall
    from patternplayground.domain.maze.maze_aggregate import Maze


class MazeFactory(ABC):
    """Domain port for creating a family of maze elements.

    The assembly algorithm only ever talks to this port, so a new family is
    added by implementing (or, more commonly, overriding part of) it.
    """

    @abstractmethod
    def make_maze(self) -> Maze:
        """Create an empty maze."""

    @abstractmethod
    def make_wall(self) -> Wall:
        """Create a wall."""

    @abstractmethod
    def make_room(self, room_no: int) -> Room:
        """Create a room identified by room_no."""

    @abstractmethod
    def make_door(self, room1: Room, room2: Room) -> Door:
        """Create a door joining room1 and room2."""
