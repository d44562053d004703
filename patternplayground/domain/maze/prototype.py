"""Prototype-based maze factory.

Instead of one subclass per family, the factory is configured with a
prototype of each element and creates new elements by cloning them. The
room may also be given as a Room class, which is then instantiated with
the requested number.
"""

from typing import Type, Union

from patternplayground.domain.base.ports.maze_factory_port import MazeFactory
from patternplayground.domain.maze.map_sites import Door, Room, Wall
from patternplayground.domain.maze.maze_aggregate import Maze


class MazePrototypeFactory(MazeFactory):
    """Factory that clones the prototypes it was initialized with."""

    def __init__(self, maze: Maze, wall: Wall, door: Door,
                 room: Union[Room, Type[Room]]):
        self.prototype_maze = maze
        self.prototype_wall = wall
        self.prototype_door = door
        self.prototype_room = room

    def make_maze(self) -> Maze:
        return self.prototype_maze.clone()

    def make_wall(self) -> Wall:
        return self.prototype_wall.clone()

    def make_room(self, room_no: int) -> Room:
        if isinstance(self.prototype_room, type):
            return self.prototype_room(room_no=room_no)
        return self.prototype_room.clone(room_no)

    def make_door(self, room1: Room, room2: Room) -> Door:
        door = self.prototype_door.clone()
        door.initialize(room1, room2)
        return door
