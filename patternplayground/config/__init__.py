"""Configuration package - schemas, defaults and the configuration manager."""

from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel
from .manager import ConfigurationManager
from .schemas import AppConfig, LoggingConfig, MazeConfig, validate_config

__all__ = [
    "DEFAULT_CONFIG",
    "LogLevel",
    "LogDestination",
    "ConfigurationManager",
    "AppConfig",
    "LoggingConfig",
    "MazeConfig",
    "validate_config",
]
