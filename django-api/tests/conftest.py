"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest
from django.apps import apps
from django.conf import settings
from django.utils import timezone
from rest_framework.test import APIClient

from events.domain import Capacity, Event, Location, Organizer, Price
from events.services.event_service import EventService
from events.stores.memory_store import InMemoryEventStore
from tickets.services.booking_service import BookingService
from tickets.stores.memory_store import InMemoryTicketStore

BOOKED_AT = timezone.make_aware(datetime(2024, 11, 20, 9, 30))


def aware(*args: int) -> datetime:
    return timezone.make_aware(datetime(*args))


def make_event(**overrides) -> Event:
    """Build an event with sensible defaults; any field can be overridden."""
    number = overrides.pop("number", 1)
    event = Event(
        id=str(number),
        slug=f"event-{number}",
        title=f"Event {number}",
        description="A short description.",
        long_description="A much longer description.",
        date=aware(2024, 12, 15, 10, 0),
        location=Location(venue="Convention Center", city="Dubai", state="Dubai", country="United Arab Emirates"),
        category="Technology",
        image_url="https://images.example.com/event.jpg",
        price=Price(Decimal("100")),
        capacity=Capacity(attendee_count=0, max_attendees=100),
        organizer=Organizer(name="Tech Events Inc", avatar="https://images.example.com/avatar.jpg"),
        created_at=aware(2024, 10, 1, 0, 0),
    )
    return replace(event, **overrides)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_stores():
    """Reload both stores from their seed files so bookings never leak between tests."""
    apps.get_app_config("events").ready()
    apps.get_app_config("tickets").ready()
    yield


@pytest.fixture
def seed_store() -> InMemoryEventStore:
    return InMemoryEventStore.from_fixture(Path(settings.EVENTS_SEED_PATH))


@pytest.fixture
def event_service(seed_store: InMemoryEventStore) -> EventService:
    return EventService(seed_store)


@pytest.fixture
def ticket_store() -> InMemoryTicketStore:
    return InMemoryTicketStore()


@pytest.fixture
def booking_service(seed_store: InMemoryEventStore, ticket_store: InMemoryTicketStore) -> BookingService:
    return BookingService(
        seed_store,
        ticket_store,
        clock=lambda: BOOKED_AT,
        id_factory=iter(f"ticket-test-{n}" for n in range(1, 100)).__next__,
    )


@pytest.fixture
def valid_submission() -> dict[str, str]:
    return {
        "name": "Sara Khan",
        "email": "sara.khan@example.com",
        "mobile": "+971501234567",
        "date": "2024-12-15",
    }
