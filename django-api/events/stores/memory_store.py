"""In-memory implementation of the EventStore.

Seeded once at startup from a JSON fixture; only seat reservations change it afterwards.
"""

import json
import threading
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any, Self

import structlog
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from events.domain import Capacity, Event, Location, Organizer, Price
from events.domain.errors import EventFullyBookedError, EventNotFoundError
from events.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)


def parse_timestamp(value: str) -> datetime:
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f"Invalid timestamp: {value!r}")
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def location_from_dict(data: Mapping[str, Any]) -> Location:
    return Location(
        venue=data["venue"],
        city=data["city"],
        state=data.get("state", ""),
        country=data["country"],
    )


def event_from_dict(data: Mapping[str, Any]) -> Event:
    """Convert a camelCase seed record to an Event."""
    end_date = data.get("endDate")
    return Event(
        id=str(data["id"]),
        slug=data["slug"],
        title=data["title"],
        description=data["description"],
        long_description=data.get("longDescription", data["description"]),
        date=parse_timestamp(data["date"]),
        end_date=parse_timestamp(end_date) if end_date else None,
        location=location_from_dict(data["location"]),
        category=data["category"],
        tags=tuple(data.get("tags", ())),
        image_url=data.get("imageUrl", ""),
        price=Price.from_raw(data.get("price")),
        capacity=Capacity(
            attendee_count=data.get("attendeeCount", 0),
            max_attendees=data["maxAttendees"],
        ),
        organizer=Organizer(
            name=data["organizer"]["name"],
            avatar=data["organizer"].get("avatar", ""),
        ),
        featured=bool(data.get("featured", False)),
        created_at=parse_timestamp(data["createdAt"]),
    )


class InMemoryEventStore(EventStore):
    """Ordered, process-local event store."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: list[Event] = []
        self._index: dict[str, int] = {}
        self._lock = threading.Lock()
        seen_ids: set[str] = set()
        for event in events:
            if event.slug in self._index:
                raise ValueError(f"Duplicate event slug: {event.slug}")
            if event.id in seen_ids:
                raise ValueError(f"Duplicate event id: {event.id}")
            seen_ids.add(event.id)
            self._index[event.slug] = len(self._events)
            self._events.append(event)

    @classmethod
    def from_fixture(cls, path: Path) -> Self:
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
        store = cls(event_from_dict(record) for record in records)
        logger.info("event_store_seeded", path=str(path), count=len(store._events))
        return store

    def list_events(self) -> list[Event]:
        return list(self._events)

    def get_event_by_slug(self, slug: str) -> Event | None:
        position = self._index.get(slug)
        return None if position is None else self._events[position]

    def reserve_seat(self, slug: str) -> Event:
        with self._lock:
            position = self._index.get(slug)
            if position is None:
                raise EventNotFoundError(slug)
            event = self._events[position]
            if event.is_fully_booked:
                raise EventFullyBookedError(slug)
            self._events[position] = event.with_booking()
            return event
