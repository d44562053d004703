# patternplayground/domain/maze/builders.py

from typing import Optional, Tuple
import logging

from patternplayground.domain.base.ports.maze_builder_port import MazeBuilder
from patternplayground.domain.base.ports.maze_factory_port import MazeFactory
from patternplayground.domain.maze.exceptions import BuilderStateError, RoomNotAdjacentError
from patternplayground.domain.maze.factories import NormalMazeFactory
from patternplayground.domain.maze.map_sites import Room
from patternplayground.domain.maze.maze_aggregate import Maze
from patternplayground.domain.maze.value_objects import Direction


class StandardMazeBuilder(MazeBuilder):
    """Builder that materializes a maze.

    Elements are created through a MazeFactory, so the same builder can
    assemble any family. Rooms are laid out west to east in ascending room
    number; a door is placed on the wall the two rooms share.
    """

    def __init__(self, factory: Optional[MazeFactory] = None):
        self._factory = factory or NormalMazeFactory()
        self._current_maze: Optional[Maze] = None
        self._logger = logging.getLogger(__name__)

    def start(self) -> None:
        self._current_maze = self._factory.make_maze()

    def add_room(self, room_no: int) -> None:
        maze = self._require_maze("add a room")
        room = self._factory.make_room(room_no)
        for direction in Direction:
            room.set_side(direction, self._factory.make_wall())
        maze.add_room(room)
        self._logger.debug("Added room %s", room_no)

    def add_door(self, from_room_no: int, to_room_no: int) -> None:
        maze = self._require_maze("add a door")
        room1 = maze.get_room(from_room_no)
        room2 = maze.get_room(to_room_no)
        door = self._factory.make_door(room1, room2)

        room1.set_side(self.common_wall(room1, room2), door)
        room2.set_side(self.common_wall(room2, room1), door)
        self._logger.debug("Added door between rooms %s and %s", from_room_no, to_room_no)

    def common_wall(self, room1: Room, room2: Room) -> Direction:
        """Side of room1 that faces room2."""
        if room1.room_no == room2.room_no:
            raise RoomNotAdjacentError(
                room1.room_no, f"Room {room1.room_no} cannot share a wall with itself"
            )
        return Direction.EAST if room1.room_no < room2.room_no else Direction.WEST

    def result(self) -> Optional[Maze]:
        return self._current_maze

    def _require_maze(self, operation: str) -> Maze:
        if self._current_maze is None:
            raise BuilderStateError(operation)
        return self._current_maze


class CountingMazeBuilder(MazeBuilder):
    """Builder that only counts the parts it is asked to build.

    It never creates a maze; result() keeps the default and returns None.
    """

    def __init__(self):
        self.rooms = 0
        self.doors = 0

    def add_room(self, room_no: int) -> None:
        self.rooms += 1

    def add_door(self, from_room_no: int, to_room_no: int) -> None:
        self.doors += 1

    def get_counts(self) -> Tuple[int, int]:
        """Return (rooms, doors)."""
        return self.rooms, self.doors
