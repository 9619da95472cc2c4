"""In-memory implementation of the TicketStore."""

import json
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Self

import structlog

from events.domain import Price
from events.stores.memory_store import location_from_dict, parse_timestamp
from tickets.domain import Ticket
from tickets.stores.interfaces import TicketStore

logger = structlog.get_logger(__name__)


def ticket_from_dict(data: Mapping[str, Any]) -> Ticket:
    """Convert a camelCase seed record to a Ticket."""
    return Ticket(
        id=data["id"],
        event_id=str(data["eventId"]),
        event_slug=data["eventSlug"],
        event_title=data["eventTitle"],
        event_date=parse_timestamp(data["eventDate"]),
        event_location=location_from_dict(data["eventLocation"]),
        attendee_name=data["attendeeName"],
        attendee_email=data["attendeeEmail"],
        attendee_mobile=data["attendeeMobile"],
        booking_date=parse_timestamp(data["bookingDate"]),
        price=Price.from_raw(data.get("price")),
    )


class InMemoryTicketStore(TicketStore):
    """Append-only, process-local ticket store."""

    def __init__(self, tickets: Iterable[Ticket] = ()) -> None:
        self._tickets: list[Ticket] = []
        self._lock = threading.Lock()
        for ticket in tickets:
            self.add(ticket)

    @classmethod
    def from_fixture(cls, path: Path) -> Self:
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
        store = cls(ticket_from_dict(record) for record in records)
        logger.info("ticket_store_seeded", path=str(path), count=len(store._tickets))
        return store

    def add(self, ticket: Ticket) -> None:
        with self._lock:
            if any(existing.id == ticket.id for existing in self._tickets):
                raise ValueError(f"Duplicate ticket id: {ticket.id}")
            self._tickets.append(ticket)

    def list_tickets(self) -> list[Ticket]:
        with self._lock:
            return list(self._tickets)

    def get_ticket(self, ticket_id: str) -> Ticket | None:
        with self._lock:
            return next((t for t in self._tickets if t.id == ticket_id), None)
