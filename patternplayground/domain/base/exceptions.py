# patternplayground/domain/base/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class InvalidStateError(DomainException):
    """Raised when an operation is attempted in the wrong lifecycle state."""
    def __init__(self, current_state: str, attempted_operation: str):
        super().__init__(
            f"Cannot {attempted_operation} while {current_state}"
        )
        self.current_state = current_state
        self.attempted_operation = attempted_operation
