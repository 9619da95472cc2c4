"""Domain models for issued tickets and booking outcomes."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Self

from events.domain import Event, Location, Price
from events.domain.errors import DomainError, ErrorCode
from tickets.domain.errors import BookingValidationError


@dataclass(frozen=True)
class Ticket:
    """A booked seat. Event fields are a snapshot taken at booking time."""

    id: str
    event_id: str
    event_slug: str
    event_title: str
    event_date: datetime
    event_location: Location
    attendee_name: str
    attendee_email: str
    attendee_mobile: str
    booking_date: datetime
    price: Price

    @classmethod
    def issue(
        cls,
        ticket_id: str,
        event: Event,
        submission: "BookingSubmission",
        booked_at: datetime,
    ) -> Self:
        return cls(
            id=ticket_id,
            event_id=event.id,
            event_slug=event.slug,
            event_title=event.title,
            event_date=event.date,
            event_location=event.location,
            attendee_name=submission.name,
            attendee_email=submission.email,
            attendee_mobile=submission.mobile,
            booking_date=booked_at,
            price=event.price,
        )


@dataclass(frozen=True)
class BookingSubmission:
    """A validated booking form."""

    name: str
    email: str
    mobile: str
    date: date


@dataclass(frozen=True)
class BookingResult:
    """Outcome of a booking attempt. Failures never raise."""

    success: bool
    ticket: Ticket | None = None
    error: str | None = None
    code: ErrorCode | None = None
    field_errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def booked(cls, ticket: Ticket) -> Self:
        return cls(success=True, ticket=ticket)

    @classmethod
    def failed(cls, error: DomainError) -> Self:
        field_errors = error.field_errors if isinstance(error, BookingValidationError) else {}
        return cls(
            success=False,
            error=error.message,
            code=error.code,
            field_errors=dict(field_errors),
        )
