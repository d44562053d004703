"""Infrastructure patterns package."""

from patternplayground.infrastructure.patterns.process_state import ProcessState, get_process_state
from patternplayground.infrastructure.patterns.singleton_access import get_singleton

__all__ = ["ProcessState", "get_process_state", "get_singleton"]
