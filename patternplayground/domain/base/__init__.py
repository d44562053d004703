"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import DomainModel, Entity, ValueObject
from .exceptions import (
    ConfigurationError,
    DomainException,
    InvalidStateError,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainModel",
    "Entity",
    "ValueObject",
    "DomainException",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "InvalidStateError",
]
