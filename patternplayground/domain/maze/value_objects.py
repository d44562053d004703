"""Maze value objects."""

from enum import Enum

from patternplayground.domain.base.entity import ValueObject


class Direction(str, Enum):
    """Compass direction of a room side."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class Spell(ValueObject):
    """Incantation an explorer must know to pass an enchanted door."""

    words: str = "abracadabra"

    def __str__(self) -> str:
        return self.words
