"""Domain error codes shared by the events and tickets modules."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_FULLY_BOOKED = "EVENT_FULLY_BOOKED"
    BOOKING_INVALID = "BOOKING_INVALID"
    BOOKING_UNAVAILABLE = "BOOKING_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when no event has the requested slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found.",
        )
        object.__setattr__(self, "slug", slug)


class EventFullyBookedError(DomainError):
    """Raised when an event has no seats left."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULLY_BOOKED,
            message="This event is fully booked.",
        )
        object.__setattr__(self, "slug", slug)
