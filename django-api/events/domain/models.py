"""Domain models representing the event catalog.

These are pure domain objects with no API input rules.
Seed loading lives in events/stores (persistence layer).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from math import ceil
from typing import Self

from events.domain.value_objects import Capacity, Location, Organizer, Price


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: str
    slug: str
    title: str
    description: str
    long_description: str
    date: datetime
    location: Location
    category: str
    image_url: str
    price: Price
    capacity: Capacity
    organizer: Organizer
    created_at: datetime
    end_date: datetime | None = None
    tags: tuple[str, ...] = ()
    featured: bool = False

    @property
    def is_fully_booked(self) -> bool:
        return self.capacity.is_full

    def with_booking(self) -> Self:
        """Return a copy with one more attendee. Raises ValueError when full."""
        return replace(self, capacity=self.capacity.with_one_more())


@dataclass(frozen=True)
class EventPage:
    """One page of a filtered, sorted event listing."""

    items: tuple[Event, ...]
    total: int
    page: int
    limit: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_pages", ceil(self.total / self.limit))

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
