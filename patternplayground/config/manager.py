"""Configuration manager - defaults, file and environment overrides."""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from patternplayground.config.defaults import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FILE_NAME,
    ENV_OVERRIDES,
)
from patternplayground.config.schemas import AppConfig, validate_config
from patternplayground.config.utils.env_expansion import expand_config_env_vars
from patternplayground.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides
    - Applying environment variable overrides
    - Variable interpolation
    - Configuration validation
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not
                        provided, PLAYGROUND_CONFDIR/playground_config.json is
                        used when it exists.
        """
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        if config_file:
            self._load_config_file(config_file)
        else:
            default_config_path = os.path.join(
                os.environ.get("PLAYGROUND_CONFDIR", ""), DEFAULT_CONFIG_FILE_NAME
            )
            if os.environ.get("PLAYGROUND_CONFDIR") and os.path.exists(default_config_path):
                self._load_config_file(default_config_path)

        # Environment variables have the highest priority
        self._load_env_vars()

        self._app_config = self.validate_config()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object"
            )
        _deep_update(self._config, user_config)
        logger.debug(f"Loaded configuration file: {config_path}")

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_OVERRIDES.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])
                logger.debug(f"Applied environment override {env_var}")

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values and revalidate.

        Args:
            user_config: Configuration dictionary to merge over the current one
        """
        _deep_update(self._config, user_config)
        self._app_config = self.validate_config()

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return expand_config_env_vars(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted key, e.g. ``maze.default_family``."""
        current: Any = self.get_config()
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def get_app_config(self) -> AppConfig:
        """Get the validated, typed configuration."""
        return self._app_config

    def validate_config(self) -> AppConfig:
        """
        Validate the configuration.

        Returns:
            Validated AppConfig

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        try:
            return validate_config(self.get_config())
        except PydanticValidationError as e:
            missing = [
                ".".join(str(loc) for loc in error["loc"])
                for error in e.errors()
                if error["type"] == "missing"
            ]
            raise ConfigurationError(f"Invalid configuration: {e}", missing) from e
