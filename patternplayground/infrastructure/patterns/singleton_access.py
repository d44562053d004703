"""Standard singleton access functions."""

from typing import Type, TypeVar, cast

from patternplayground.domain.base.exceptions import ConfigurationError
from patternplayground.infrastructure.patterns.process_state import get_process_state

T = TypeVar("T")


def get_singleton(singleton_class: Type[T]) -> T:
    """
    Standard way to get singleton instances.

    Singletons are created eagerly by the process state container; this
    function only looks them up. A class matches its own instance first and
    otherwise any instance of a subclass, so asking for the MazeFactory port
    returns the shared default factory.

    Args:
        singleton_class: The class to get the instance of

    Returns:
        The singleton instance

    Raises:
        ConfigurationError: If no singleton of that class exists
    """
    instances = get_process_state().instances()
    if singleton_class in instances:
        return cast(T, instances[singleton_class])

    for instance in instances.values():
        if isinstance(instance, singleton_class):
            return cast(T, instance)

    raise ConfigurationError(f"No singleton registered for {singleton_class.__name__}")
