"""Family Registry - Registry pattern for maze factory and builder families.

This module maps family names to the callables that create them, so callers
(the CLI, tests, applications) can select a construction family by name
without conditionals on concrete types. Adding a family means registering
one more callable; nothing that consumes the registry changes.

Every registered callable takes an optional MazeConfig and returns a new
MazeFactory or MazeBuilder.
"""

import logging
from typing import Callable, Dict, List, Optional

from patternplayground.config.schemas import MazeConfig
from patternplayground.domain.base.exceptions import ConfigurationError, DomainException
from patternplayground.domain.base.ports import MazeBuilder, MazeFactory
from patternplayground.domain.maze import (
    BombedMazeFactory,
    BombedWall,
    CountingMazeBuilder,
    Door,
    EnchantedMazeFactory,
    Maze,
    MazePrototypeFactory,
    NormalMazeFactory,
    Room,
    RoomWithABomb,
    Spell,
    StandardMazeBuilder,
    Wall,
)

FactoryCallable = Callable[[Optional[MazeConfig]], MazeFactory]
BuilderCallable = Callable[[Optional[MazeConfig]], MazeBuilder]


class UnsupportedFamilyError(DomainException):
    """Exception raised when an unregistered family is requested."""
    pass


class FamilyRegistration:
    """Container for family registration information."""

    def __init__(self, family_name: str, kind: str, creator: Callable, description: str = ""):
        """
        Initialize family registration.

        Args:
            family_name: Name the family is selected by (e.g., 'normal', 'counting')
            kind: Either 'factory' or 'builder'
            creator: Callable taking an optional MazeConfig and returning the family
            description: One-line human-readable description
        """
        self.family_name = family_name
        self.kind = kind
        self.creator = creator
        self.description = description

    def __repr__(self) -> str:
        return f"FamilyRegistration(name='{self.family_name}', kind='{self.kind}')"


class FamilyRegistry:
    """
    Registry for maze factory and builder families.

    Factories and builders live in separate namespaces, so a factory and a
    builder may share a name.
    """

    FACTORY = "factory"
    BUILDER = "builder"

    def __init__(self):
        self._registrations: Dict[str, Dict[str, FamilyRegistration]] = {
            self.FACTORY: {},
            self.BUILDER: {},
        }
        self.logger = logging.getLogger(__name__)

    def register_factory(self, family_name: str, creator: FactoryCallable,
                         description: str = "") -> None:
        """
        Register a factory family.

        Raises:
            ConfigurationError: If the family name is already registered
        """
        self._register(self.FACTORY, family_name, creator, description)

    def register_builder(self, builder_name: str, creator: BuilderCallable,
                         description: str = "") -> None:
        """
        Register a builder.

        Raises:
            ConfigurationError: If the builder name is already registered
        """
        self._register(self.BUILDER, builder_name, creator, description)

    def create_factory(self, family_name: str, config: Optional[MazeConfig] = None) -> MazeFactory:
        """
        Create a maze factory for the given family.

        Args:
            family_name: Registered factory family name
            config: Optional maze configuration passed to the creator

        Returns:
            New MazeFactory instance

        Raises:
            UnsupportedFamilyError: If the family is not registered
        """
        registration = self._get_registration(self.FACTORY, family_name)
        factory = registration.creator(config)
        self.logger.debug(f"Created maze factory {type(factory).__name__} for family {family_name}")
        return factory

    def create_builder(self, builder_name: str, config: Optional[MazeConfig] = None) -> MazeBuilder:
        """
        Create a maze builder.

        Raises:
            UnsupportedFamilyError: If the builder is not registered
        """
        registration = self._get_registration(self.BUILDER, builder_name)
        builder = registration.creator(config)
        self.logger.debug(f"Created maze builder {type(builder).__name__} for {builder_name}")
        return builder

    def factory_names(self) -> List[str]:
        return list(self._registrations[self.FACTORY].keys())

    def builder_names(self) -> List[str]:
        return list(self._registrations[self.BUILDER].keys())

    def describe(self) -> Dict[str, Dict[str, str]]:
        """Name to description mapping for every registered family."""
        return {
            kind: {name: reg.description for name, reg in registrations.items()}
            for kind, registrations in self._registrations.items()
        }

    def is_registered(self, kind: str, name: str) -> bool:
        return name in self._registrations.get(kind, {})

    def _register(self, kind: str, name: str, creator: Callable, description: str) -> None:
        registrations = self._registrations[kind]
        if name in registrations:
            raise ConfigurationError(f"Maze {kind} '{name}' is already registered")

        registration = FamilyRegistration(name, kind, creator, description)
        registrations[name] = registration
        self.logger.debug(f"Registered maze {kind} '{name}'")

    def _get_registration(self, kind: str, name: str) -> FamilyRegistration:
        registrations = self._registrations[kind]
        if name not in registrations:
            raise UnsupportedFamilyError(
                f"Maze {kind} '{name}' is not registered. "
                f"Available: {list(registrations.keys())}"
            )
        return registrations[name]


def _enchanted_factory(config: Optional[MazeConfig]) -> MazeFactory:
    spell = Spell(words=config.enchanted_spell) if config else Spell()
    return EnchantedMazeFactory(spell=spell)


def _prototype_factory(config: Optional[MazeConfig]) -> MazeFactory:
    return MazePrototypeFactory(Maze(), Wall(), Door(), Room(room_no=0))


def _bombed_prototype_factory(config: Optional[MazeConfig]) -> MazeFactory:
    return MazePrototypeFactory(Maze(), BombedWall(), Door(), RoomWithABomb(room_no=0))


def register_builtin_families(registry: FamilyRegistry) -> FamilyRegistry:
    """Register every family shipped with the package."""
    registry.register_factory(
        "normal", lambda config: NormalMazeFactory(), "Plain rooms, walls and doors"
    )
    registry.register_factory(
        "enchanted", _enchanted_factory, "Enchanted rooms and doors that need a spell"
    )
    registry.register_factory(
        "bombed", lambda config: BombedMazeFactory(), "Rooms with bombs and bombable walls"
    )
    registry.register_factory(
        "prototype", _prototype_factory, "Clones of plain prototype elements"
    )
    registry.register_factory(
        "prototype-bombed", _bombed_prototype_factory, "Clones of bombed prototype elements"
    )

    registry.register_builder(
        "standard", lambda config: StandardMazeBuilder(), "Builds a plain maze"
    )
    registry.register_builder(
        "counting", lambda config: CountingMazeBuilder(), "Counts rooms and doors only"
    )
    return registry
