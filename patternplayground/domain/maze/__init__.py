"""Maze bounded context - map sites, the maze aggregate and construction families."""

from .builders import CountingMazeBuilder, StandardMazeBuilder
from .exceptions import (
    BuilderStateError,
    MazeException,
    MazeReferenceError,
    RoomNotAdjacentError,
    RoomNotFoundError,
    SpellRequiredError,
)
from .factories import (
    BombedMazeFactory,
    DefaultMazeFactory,
    EnchantedMazeFactory,
    NormalMazeFactory,
)
from .map_sites import (
    BombedWall,
    Door,
    DoorNeedingSpell,
    EnchantedRoom,
    MapSite,
    Room,
    RoomWithABomb,
    Wall,
)
from .maze_aggregate import Maze
from .prototype import MazePrototypeFactory
from .value_objects import Direction, Spell

__all__ = [
    # Value objects
    "Direction",
    "Spell",
    # Map sites
    "MapSite",
    "Wall",
    "BombedWall",
    "Room",
    "EnchantedRoom",
    "RoomWithABomb",
    "Door",
    "DoorNeedingSpell",
    # Aggregate
    "Maze",
    # Factories
    "DefaultMazeFactory",
    "NormalMazeFactory",
    "EnchantedMazeFactory",
    "BombedMazeFactory",
    "MazePrototypeFactory",
    # Builders
    "StandardMazeBuilder",
    "CountingMazeBuilder",
    # Exceptions
    "MazeException",
    "MazeReferenceError",
    "RoomNotFoundError",
    "RoomNotAdjacentError",
    "SpellRequiredError",
    "BuilderStateError",
]
