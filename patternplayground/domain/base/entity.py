"""Base domain models - foundation for all domain objects."""
from typing import Any
from abc import ABC, abstractmethod
from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for mutable domain objects."""
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        arbitrary_types_allowed=True
    )


class ValueObject(BaseModel):
    """Base class for immutable value objects, compared by value."""
    model_config = ConfigDict(frozen=True)


class Entity(DomainModel, ABC):
    """Base class for entities that are identified by a key, not by their state."""

    @abstractmethod
    def get_id(self) -> Any:
        """Get the entity identifier."""

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they share the same identity key."""
        if not isinstance(other, Entity) or not self._same_identity_family(other):
            return False
        return self.get_id() == other.get_id()

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.get_id())

    def _same_identity_family(self, other: "Entity") -> bool:
        return isinstance(other, self.__class__) or isinstance(self, other.__class__)
