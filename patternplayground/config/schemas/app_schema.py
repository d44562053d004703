"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig
from .maze_schema import MazeConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    maze: MazeConfig = Field(default_factory=lambda: MazeConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
