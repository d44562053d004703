"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

from patternplayground.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(
        LogDestination.STDOUT, description="Where log records are written"
    )
    file_path: str = Field(
        "logs/pattern_playground.log", description="Log file path"
    )
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Log rotation settings must not be negative")
        return v
