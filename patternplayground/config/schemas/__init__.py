"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig
from .maze_schema import MazeConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Logging configuration
    "LoggingConfig",
    # Maze configuration
    "MazeConfig",
]
