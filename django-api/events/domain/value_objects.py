"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self

FREE = "free"


@dataclass(frozen=True)
class Location:
    """Where an event takes place."""

    venue: str
    city: str
    state: str
    country: str

    @property
    def city_country(self) -> str:
        return f"{self.city}, {self.country}"


@dataclass(frozen=True)
class Organizer:
    """Who runs an event."""

    name: str
    avatar: str


@dataclass(frozen=True)
class Price:
    """Ticket price: a non-negative amount, or free when amount is None."""

    amount: Decimal | None = None

    def __post_init__(self) -> None:
        if self.amount is not None and self.amount < 0:
            raise ValueError("Price amount cannot be negative")

    @classmethod
    def free(cls) -> Self:
        return cls(amount=None)

    @classmethod
    def from_raw(cls, value: object) -> Self:
        """Build a Price from a number, a numeric string or the "free" sentinel."""
        if value is None or value == FREE:
            return cls.free()
        try:
            return cls(amount=Decimal(str(value)))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid price: {value!r}") from exc

    @property
    def is_free(self) -> bool:
        return self.amount is None

    def to_raw(self) -> int | float | str:
        """Inverse of from_raw, keeping whole amounts as integers."""
        if self.amount is None:
            return FREE
        if self.amount == self.amount.to_integral_value():
            return int(self.amount)
        return float(self.amount)

    def __str__(self) -> str:
        if self.amount is None:
            return FREE
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Seats taken versus seats available."""

    attendee_count: int
    max_attendees: int

    def __post_init__(self) -> None:
        if self.attendee_count < 0 or self.max_attendees < 0:
            raise ValueError("Capacity cannot be negative")
        if self.attendee_count > self.max_attendees:
            raise ValueError("Attendee count cannot exceed max attendees")

    @property
    def is_full(self) -> bool:
        return self.attendee_count >= self.max_attendees

    @property
    def remaining(self) -> int:
        return self.max_attendees - self.attendee_count

    def with_one_more(self) -> Self:
        return type(self)(self.attendee_count + 1, self.max_attendees)
