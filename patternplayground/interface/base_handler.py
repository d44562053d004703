"""Base class for CLI command handlers."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from patternplayground.config.schemas import AppConfig
from patternplayground.infrastructure.logging.logger import get_logger
from patternplayground.infrastructure.patterns.process_state import ProcessState


class CLICommandHandler(ABC):
    """Base CLI command handler with injected process state and configuration."""

    def __init__(self, state: ProcessState, config: AppConfig, logger=None):
        """Initialize handler with injected dependencies.

        Args:
            state: Process-wide state holding the family registry
            config: Validated application configuration
            logger: Logger instance for logging operations
        """
        self.state = state
        self.config = config
        self.logger = logger or get_logger(type(self).__module__)

    @abstractmethod
    def handle(self, command) -> Dict[str, Any]:
        """Handle the command and return a result dictionary."""

    @staticmethod
    def _arg(command, name: str, default: Optional[Any] = None) -> Any:
        value = getattr(command, name, None)
        return default if value is None else value
