"""Command handlers orchestrator for the interface layer.

This module provides a single import point for all command handlers:
- Maze operations (CreateMazeCLIHandler, BuildMazeCLIHandler, ListFamiliesCLIHandler)
- Pattern examples (ShowAlertCLIHandler, ShapeBoundingBoxCLIHandler)
"""

from patternplayground.interface.base_handler import CLICommandHandler
from patternplayground.interface.maze_command_handlers import (
    BuildMazeCLIHandler,
    CreateMazeCLIHandler,
    ListFamiliesCLIHandler,
)
from patternplayground.interface.pattern_command_handlers import (
    ShapeBoundingBoxCLIHandler,
    ShowAlertCLIHandler,
)

COMMAND_HANDLERS = {
    ("maze", "create"): CreateMazeCLIHandler,
    ("maze", "build"): BuildMazeCLIHandler,
    ("families", "list"): ListFamiliesCLIHandler,
    ("alerts", "show"): ShowAlertCLIHandler,
    ("shapes", "bbox"): ShapeBoundingBoxCLIHandler,
}

__all__ = [
    # Base handler
    "CLICommandHandler",
    # Maze handlers
    "CreateMazeCLIHandler",
    "BuildMazeCLIHandler",
    "ListFamiliesCLIHandler",
    # Pattern example handlers
    "ShowAlertCLIHandler",
    "ShapeBoundingBoxCLIHandler",
    "COMMAND_HANDLERS",
]
