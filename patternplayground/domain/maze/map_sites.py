"""Map sites - everything that can occupy a side of a room.

A room has four sides (north, south, east, west). Each side is either empty
or holds a map site: a wall, a door, or another room. Every site supports
``enter()``, a traversal hook that is a no-op unless a variant gives it a
side effect (doors open, armed rooms detonate).

Rooms are reference-identified: a door keeps references to the very room
objects that the maze owns, and rooms compare equal by ``room_no`` alone.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from patternplayground.domain.base.entity import DomainModel, Entity
from patternplayground.domain.maze.exceptions import (
    MazeReferenceError,
    RoomNotAdjacentError,
    SpellRequiredError,
)
from patternplayground.domain.maze.value_objects import Direction, Spell


class MapSite(DomainModel):
    """Base for anything that can occupy a side of a room."""

    def enter(self, spell: Optional[Spell] = None) -> None:
        """Traverse this site. No effect by default."""

    def describe(self) -> str:
        """Short human-readable description used when rendering a maze."""
        return type(self).__name__

    def clone(self) -> "MapSite":
        """Return a copy of this site, used by prototype-based factories."""
        return self.model_copy()

    def __str__(self) -> str:
        return self.describe()


class Wall(MapSite):
    """Plain wall. Entering it has no effect."""


class BombedWall(Wall):
    """Wall that a bomb can destroy."""

    is_bombed: bool = False

    def describe(self) -> str:
        return f"BombedWall bombed={self.is_bombed}"


def _empty_sides() -> Dict[Direction, Optional[MapSite]]:
    return {direction: None for direction in Direction}


class Room(MapSite, Entity):
    """Numbered room with four directional sides."""

    room_no: int = Field(frozen=True)
    sides: Dict[Direction, Optional[MapSite]] = Field(
        default_factory=_empty_sides, repr=False
    )

    def get_id(self) -> Any:
        return self.room_no

    def get_side(self, direction: Direction) -> Optional[MapSite]:
        """Return the site on the given side, or None when the side is unset."""
        return self.sides.get(Direction(direction))

    def set_side(self, direction: Direction, site: MapSite) -> None:
        """Place a site on the given side, replacing whatever was there."""
        self.sides[Direction(direction)] = site

    def clone(self, room_no: Optional[int] = None) -> "Room":
        """Copy this room's configuration with fresh, empty sides."""
        return self.model_copy(
            update={
                "room_no": self.room_no if room_no is None else room_no,
                "sides": _empty_sides(),
            }
        )


class EnchantedRoom(Room):
    """Room carrying the spell that opens its doors."""

    spell: Spell = Field(default_factory=Spell)


class RoomWithABomb(Room):
    """Room hiding a bomb. Entering an armed room destroys its bombed walls."""

    is_armed: bool = False

    def arm(self) -> None:
        self.is_armed = True

    def enter(self, spell: Optional[Spell] = None) -> None:
        if not self.is_armed:
            return
        for site in self.sides.values():
            if isinstance(site, BombedWall):
                site.is_bombed = True
        self.is_armed = False

    def describe(self) -> str:
        return f"RoomWithABomb armed={self.is_armed}"


class Door(MapSite):
    """Door joining two rooms.

    The door holds references to the rooms it joins, never copies, so the
    rooms it reports are always the maze's own rooms. ``room1`` and
    ``room2`` are only unset on a prototype door that has not been
    initialized yet.
    """

    room1: Optional[Room] = Field(default=None, repr=False)
    room2: Optional[Room] = Field(default=None, repr=False)
    is_open: bool = False

    @property
    def is_connected(self) -> bool:
        return self.room1 is not None and self.room2 is not None

    def initialize(self, room1: Room, room2: Room) -> None:
        """Attach this door to two rooms."""
        self.room1 = room1
        self.room2 = room2

    def enter(self, spell: Optional[Spell] = None) -> None:
        self._check_passage(spell)
        self.is_open = True

    def other_side_from(self, room: Room, spell: Optional[Spell] = None) -> Room:
        """Return the room on the other side of the door, opening it.

        Raises:
            MazeReferenceError: If the door is not attached to two rooms
            RoomNotAdjacentError: If room is neither of the joined rooms
        """
        if not self.is_connected:
            raise MazeReferenceError("Door is not attached to two rooms")
        if room == self.room1:
            other = self.room2
        elif room == self.room2:
            other = self.room1
        else:
            raise RoomNotAdjacentError(room.room_no)

        self._check_passage(spell)
        self.is_open = True
        return other

    def _check_passage(self, spell: Optional[Spell]) -> None:
        """Precondition hook for traversal; plain doors always let you through."""


class DoorNeedingSpell(Door):
    """Door that only opens for the matching spell."""

    required_spell: Spell = Field(default_factory=Spell)

    def _check_passage(self, spell: Optional[Spell]) -> None:
        if spell != self.required_spell:
            raise SpellRequiredError(
                self.required_spell.words, spell.words if spell else ""
            )
