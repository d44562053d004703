# patternplayground/application/maze/service.py
from typing import Optional
import logging

from patternplayground.domain.base.ports import MazeBuilder, MazeFactory
from patternplayground.domain.maze.maze_aggregate import Maze
from patternplayground.domain.maze.value_objects import Direction

FIRST_ROOM_NO = 1
SECOND_ROOM_NO = 2


class MazeGame:
    """Application service assembling the reference maze.

    The reference maze is two rooms joined by one door. The same sequence
    of calls is issued against any MazeFactory or MazeBuilder; which
    concrete rooms, walls and doors end up in the maze is decided entirely
    by the family passed in.
    """

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    def create_maze(self, factory: MazeFactory) -> Maze:
        """Assemble the reference maze through a factory."""
        maze = factory.make_maze()
        room1 = factory.make_room(FIRST_ROOM_NO)
        room2 = factory.make_room(SECOND_ROOM_NO)
        door = factory.make_door(room1, room2)

        room1.set_side(Direction.NORTH, factory.make_wall())
        room1.set_side(Direction.EAST, door)
        room1.set_side(Direction.SOUTH, factory.make_wall())
        room1.set_side(Direction.WEST, factory.make_wall())

        room2.set_side(Direction.NORTH, factory.make_wall())
        room2.set_side(Direction.EAST, factory.make_wall())
        room2.set_side(Direction.SOUTH, factory.make_wall())
        room2.set_side(Direction.WEST, door)

        maze.add_room(room1)
        maze.add_room(room2)

        self._logger.info(
            f"Created maze with {type(factory).__name__}: {len(maze)} rooms"
        )
        return maze

    def build_maze(self, builder: MazeBuilder) -> Optional[Maze]:
        """Assemble the reference maze through a builder.

        Returns:
            Whatever the builder's result() yields, which is None for
            builders that do not materialize a maze
        """
        builder.start()
        builder.add_room(FIRST_ROOM_NO)
        builder.add_room(SECOND_ROOM_NO)
        builder.add_door(FIRST_ROOM_NO, SECOND_ROOM_NO)

        maze = builder.result()
        self._logger.info(
            f"Built maze with {type(builder).__name__}: "
            f"{len(maze) if maze is not None else 'no'} rooms"
        )
        return maze
