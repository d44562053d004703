"""Domain port for step-wise maze construction (builder shape)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from patternplayground.domain.maze.maze_aggregate import Maze


class MazeBuilder:
    """Sequence of build steps with no-op defaults.

    Concrete builders override only the steps they care about. A builder is
    not required to produce a maze at all: one that merely observes the
    steps keeps the default result() and returns None.
    """

    def start(self) -> None:
        """Begin a new maze."""

    def add_room(self, room_no: int) -> None:
        """Add a room identified by room_no."""

    def add_door(self, from_room_no: int, to_room_no: int) -> None:
        """Add a door between two previously added rooms."""

    def result(self) -> Optional[Maze]:
        """Return the constructed maze, if this builder produces one."""
        return None
