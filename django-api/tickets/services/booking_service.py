"""Booking service - the ticket booking workflow.

A booking either fully succeeds (seat taken, ticket stored) or fully fails
(nothing changes). Domain errors are mapped to a BookingResult and never
escape to callers.
"""

import uuid
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

import structlog
from django.utils import timezone

from events.domain.errors import DomainError, EventFullyBookedError, EventNotFoundError
from events.services.simulation import SimulatedNetwork
from events.stores.interfaces import EventStore
from tickets.domain import BookingResult, Ticket
from tickets.domain.errors import BookingUnavailableError, BookingValidationError
from tickets.domain.validation import validate_submission
from tickets.stores.interfaces import TicketStore

logger = structlog.get_logger(__name__)


def new_ticket_id() -> str:
    return f"ticket-{uuid.uuid4().hex}"


class BookingService:
    """Service for booking tickets and listing booked tickets."""

    def __init__(
        self,
        event_store: EventStore,
        ticket_store: TicketStore,
        network: SimulatedNetwork | None = None,
        clock: Callable[[], datetime] = timezone.now,
        id_factory: Callable[[], str] = new_ticket_id,
    ) -> None:
        self._events = event_store
        self._tickets = ticket_store
        self._network = network or SimulatedNetwork()
        self._clock = clock
        self._new_id = id_factory

    def book_ticket(self, event_slug: str, submission: Mapping[str, Any]) -> BookingResult:
        """Validate the submission and issue a ticket for the event."""
        try:
            ticket = self._book(event_slug, submission)
        except DomainError as exc:
            logger.info(
                "booking_failed",
                event_slug=event_slug,
                code=exc.code.value,
                fields=sorted(exc.field_errors) if isinstance(exc, BookingValidationError) else [],
            )
            return BookingResult.failed(exc)

        logger.info("booking_succeeded", event_slug=event_slug, ticket_id=ticket.id)
        return BookingResult.booked(ticket)

    def _book(self, event_slug: str, submission: Mapping[str, Any]) -> Ticket:
        booking = validate_submission(submission)

        self._network.wait()
        if self._network.should_fail():
            raise BookingUnavailableError()

        event = self._events.get_event_by_slug(event_slug)
        if event is None:
            raise EventNotFoundError(event_slug)
        if event.is_fully_booked:
            raise EventFullyBookedError(event_slug)

        # The check above is a fast path; reserve_seat re-checks under the store lock.
        snapshot = self._events.reserve_seat(event_slug)
        ticket = Ticket.issue(self._new_id(), snapshot, booking, self._clock())
        self._tickets.add(ticket)
        return ticket

    def list_tickets(self) -> list[Ticket]:
        self._network.wait()
        return self._tickets.list_tickets()

    def get_ticket(self, ticket_id: str) -> Ticket | None:
        return self._tickets.get_ticket(ticket_id)
