"""Maze domain exceptions."""

from patternplayground.domain.base.exceptions import (
    DomainException,
    InvalidStateError,
    ResourceNotFoundError,
)


class MazeException(DomainException):
    """Base exception for maze domain errors."""


class RoomNotFoundError(ResourceNotFoundError):
    """Raised when a room number is not present in a maze."""

    def __init__(self, room_no: int):
        super().__init__("Room", room_no)
        self.room_no = room_no


class MazeReferenceError(MazeException):
    """Raised when a site references a room or capability it cannot use."""


class RoomNotAdjacentError(MazeReferenceError):
    """Raised when a room is not one of the two rooms a door joins."""

    def __init__(self, room_no: int, message: str = ""):
        super().__init__(message or f"Room {room_no} is not joined by this door")
        self.room_no = room_no


class SpellRequiredError(MazeReferenceError):
    """Raised when a door needing a spell is traversed without the matching spell."""

    def __init__(self, required: str, given: str = ""):
        super().__init__(
            f"Door needs spell '{required}'" + (f", got '{given}'" if given else "")
        )
        self.required = required
        self.given = given


class BuilderStateError(InvalidStateError):
    """Raised when a builder step is called before the maze was started."""

    def __init__(self, attempted_operation: str):
        super().__init__("no maze has been started", attempted_operation)
