"""Maze aggregate - the rooms of one maze, keyed by room number."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from patternplayground.domain.base.entity import DomainModel
from patternplayground.domain.maze.exceptions import RoomNotFoundError
from patternplayground.domain.maze.map_sites import Door, Room
from patternplayground.domain.maze.value_objects import Direction

DEFAULT_BANNER_WIDTH = 27


class Maze(DomainModel):
    """Aggregate root owning a set of rooms.

    Room numbers are unique keys; adding a room whose number is already
    present replaces the previous room, and every door in the maze that
    joined the replaced room is re-pointed at the new one. Iteration and
    rendering follow insertion order.
    """

    room_map: Dict[int, Room] = Field(default_factory=dict, repr=False)

    def add_room(self, room: Room) -> None:
        """Insert a room, overwriting any room with the same number."""
        replaced = self.room_map.get(room.room_no)
        self.room_map[room.room_no] = room
        if replaced is not None and replaced is not room:
            self._repoint_doors(replaced, room)

    def room(self, room_no: int) -> Optional[Room]:
        """Look up a room by number. Returns None when absent."""
        return self.room_map.get(room_no)

    def get_room(self, room_no: int) -> Room:
        """Look up a room by number.

        Raises:
            RoomNotFoundError: If the maze has no room with that number
        """
        room = self.room(room_no)
        if room is None:
            raise RoomNotFoundError(room_no)
        return room

    def _repoint_doors(self, replaced: Room, room: Room) -> None:
        doors = {
            id(site): site
            for site in list(replaced.sides.values())
            + [s for r in self.room_map.values() for s in r.sides.values()]
            if isinstance(site, Door)
        }
        for door in doors.values():
            if door.room1 is replaced:
                door.room1 = room
            if door.room2 is replaced:
                door.room2 = room

    @property
    def rooms(self) -> List[Room]:
        return list(self.room_map.values())

    def clone(self) -> "Maze":
        """Return a new, empty maze of the same type."""
        return type(self)()

    def render(self, banner_width: int = DEFAULT_BANNER_WIDTH) -> str:
        """Multi-line diagnostic description of every room and its sides."""
        banner = "=" * banner_width
        lines = [banner, "Maze rooms:"]
        for room_no, room in self.room_map.items():
            lines.append(f"room_{room_no} {room.describe()}")
            for direction in Direction:
                lines.append(f"{direction.value} is {room.get_side(direction)}")
        lines.append(banner)
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        """Structured summary of the maze for machine-readable output."""
        rooms = []
        for room in self.room_map.values():
            entry: Dict[str, Any] = {"room_no": room.room_no, "kind": room.describe()}
            for direction in Direction:
                site = room.get_side(direction)
                entry[direction.value] = site.describe() if site is not None else None
            rooms.append(entry)
        return {"room_count": len(rooms), "rooms": rooms}

    def __len__(self) -> int:
        return len(self.room_map)

    def __contains__(self, room_no: object) -> bool:
        return room_no in self.room_map

    def __str__(self) -> str:
        return self.render()
