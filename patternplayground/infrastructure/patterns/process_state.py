"""Process-wide state container.

This module is the single initialization point for objects that exist once
per process: the default maze factory and the populated family registry.
Everything is built eagerly when the module is imported and never replaced
afterwards, so concurrent readers need no locking.
"""

from typing import Any, Dict, Type

from patternplayground.domain.base.ports import MazeFactory
from patternplayground.domain.maze import NormalMazeFactory
from patternplayground.infrastructure.registry.family_registry import (
    FamilyRegistry,
    register_builtin_families,
)


class ProcessState:
    """Holds the process-wide instances."""

    def __init__(self, maze_factory: MazeFactory, family_registry: FamilyRegistry):
        self._maze_factory = maze_factory
        self._family_registry = family_registry

    @property
    def maze_factory(self) -> MazeFactory:
        """The shared default maze factory."""
        return self._maze_factory

    @property
    def family_registry(self) -> FamilyRegistry:
        return self._family_registry

    def instances(self) -> Dict[Type[Any], Any]:
        """Singleton instances keyed by their concrete class."""
        return {
            type(self._maze_factory): self._maze_factory,
            type(self._family_registry): self._family_registry,
        }


def _initialize_process_state() -> ProcessState:
    registry = register_builtin_families(FamilyRegistry())
    return ProcessState(maze_factory=NormalMazeFactory(), family_registry=registry)


_PROCESS_STATE = _initialize_process_state()


def get_process_state() -> ProcessState:
    """Get the process-wide state container."""
    return _PROCESS_STATE
