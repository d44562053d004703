"""Maze factory families.

``DefaultMazeFactory`` supplies the default wiring for every creation
operation. A family subclasses it and overrides only the element types it
wants to change; everything else keeps the default.
"""

from typing import Optional

from patternplayground.domain.base.ports.maze_factory_port import MazeFactory
from patternplayground.domain.maze.map_sites import (
    BombedWall,
    Door,
    DoorNeedingSpell,
    EnchantedRoom,
    Room,
    RoomWithABomb,
    Wall,
)
from patternplayground.domain.maze.maze_aggregate import Maze
from patternplayground.domain.maze.value_objects import Spell


class DefaultMazeFactory(MazeFactory):
    """Default implementation of every creation operation."""

    def make_maze(self) -> Maze:
        return Maze()

    def make_wall(self) -> Wall:
        return Wall()

    def make_room(self, room_no: int) -> Room:
        return Room(room_no=room_no)

    def make_door(self, room1: Room, room2: Room) -> Door:
        return Door(room1=room1, room2=room2)


class NormalMazeFactory(DefaultMazeFactory):
    """Plain rooms, walls and doors."""


class EnchantedMazeFactory(DefaultMazeFactory):
    """Enchanted rooms joined by doors that need the rooms' spell."""

    def __init__(self, spell: Optional[Spell] = None):
        self.spell = spell or Spell()

    def make_room(self, room_no: int) -> EnchantedRoom:
        return EnchantedRoom(room_no=room_no, spell=self.spell)

    def make_door(self, room1: Room, room2: Room) -> DoorNeedingSpell:
        return DoorNeedingSpell(room1=room1, room2=room2, required_spell=self.spell)


class BombedMazeFactory(DefaultMazeFactory):
    """Rooms that may hide a bomb, surrounded by walls a bomb can destroy."""

    def make_wall(self) -> BombedWall:
        return BombedWall(is_bombed=False)

    def make_room(self, room_no: int) -> RoomWithABomb:
        return RoomWithABomb(room_no=room_no, is_armed=False)
