# patternplayground/config/defaults.py
from typing import Dict, Any
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


DEFAULT_CONFIG_FILE_NAME = "playground_config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "${PLAYGROUND_ENVIRONMENT:development}",
    "debug": False,

    # Logging configuration
    "logging": {
        "level": "WARNING",
        "destination": "stdout",
        "file_path": "${PLAYGROUND_LOGDIR:logs}/pattern_playground.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Maze construction defaults
    "maze": {
        "default_family": "normal",
        "default_builder": "standard",
        "enchanted_spell": "abracadabra",
        "banner_width": 27,
    },
}

# Environment variables that override a single nested setting
ENV_OVERRIDES: Dict[str, tuple] = {
    "PLAYGROUND_LOG_LEVEL": ("logging", "level"),
    "PLAYGROUND_LOG_DESTINATION": ("logging", "destination"),
    "PLAYGROUND_DEFAULT_FAMILY": ("maze", "default_family"),
    "PLAYGROUND_DEFAULT_BUILDER": ("maze", "default_builder"),
    "PLAYGROUND_ENCHANTED_SPELL": ("maze", "enchanted_spell"),
}
