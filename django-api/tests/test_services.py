"""Unit tests for EventService and BookingService.

These run against the seed catalog in fresh in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import random
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from decimal import Decimal

import pytest
from django.utils import timezone

from conftest import BOOKED_AT, aware, make_event
from events.domain import Capacity, EventFilters, Location, Pagination, Price
from events.domain.errors import ErrorCode, EventNotFoundError
from events.services.event_service import EventService, matches
from events.services.simulation import SimulatedNetwork
from events.stores.memory_store import InMemoryEventStore
from tickets.services.booking_service import BookingService
from tickets.stores.memory_store import InMemoryTicketStore

RIYADH = Location(venue="City Park", city="Riyadh", state="Riyadh", country="Saudi Arabia")


class TestMatches:
    """Tests for the per-event filter predicate."""

    def test_search_is_case_insensitive_on_title(self):
        """Search matches a title substring regardless of case."""
        event = make_event(title="Tech Summit 2024")
        assert matches(event, EventFilters(search="SUMMIT"))
        assert not matches(event, EventFilters(search="festival"))

    def test_search_ignores_description(self):
        """Search looks at the title only."""
        event = make_event(title="Tech Summit", description="A jazz night")
        assert not matches(event, EventFilters(search="jazz"))

    def test_category_is_exact(self):
        """Category must match exactly, including case."""
        event = make_event(category="Music")
        assert matches(event, EventFilters(category="Music"))
        assert not matches(event, EventFilters(category="music"))

    def test_location_matches_city_country_substring(self):
        """Location matches "City, Country" or either part, ignoring case."""
        event = make_event()
        assert matches(event, EventFilters(location="Dubai, United Arab Emirates"))
        assert matches(event, EventFilters(location="dubai"))
        assert not matches(event, EventFilters(location="Riyadh"))

    def test_bare_date_bounds_are_inclusive_days(self):
        """A bare date bound includes the whole day at both ends."""
        event = make_event(date=aware(2024, 12, 15, 23, 0))
        assert matches(event, EventFilters(date_from=date(2024, 12, 15), date_to=date(2024, 12, 15)))

    def test_datetime_bounds_compare_timestamps(self):
        """A timestamp bound compares against the event's start time."""
        event = make_event(date=aware(2024, 12, 15, 10, 0))
        assert not matches(event, EventFilters(date_from=aware(2024, 12, 15, 11, 0)))
        assert matches(event, EventFilters(date_to=aware(2024, 12, 15, 10, 0)))

    def test_featured(self):
        """The featured flag filters in both directions."""
        assert matches(make_event(featured=True), EventFilters(featured=True))
        assert not matches(make_event(featured=False), EventFilters(featured=True))
        assert matches(make_event(featured=False), EventFilters(featured=False))


class TestEventServiceQuery:
    """Tests for EventService.query against the seed catalog."""

    def test_no_filters_returns_everything_sorted_by_date(self, event_service: EventService):
        """Without filters every event comes back, earliest first."""
        result = event_service.query(EventFilters(), Pagination(page=1, limit=100))
        dates = [event.date for event in result.items]
        assert result.total == 10
        assert dates == sorted(dates)
        assert result.items[0].slug == "art-exhibition-modern"

    def test_category_with_pagination(self):
        """Three Music events of five, limit 2: two items, three total, two pages."""
        events = [
            make_event(number=1, category="Music", date=aware(2024, 12, 20, 10, 0)),
            make_event(number=2, category="Art"),
            make_event(number=3, category="Music", date=aware(2024, 12, 10, 10, 0)),
            make_event(number=4, category="Sports"),
            make_event(number=5, category="Music", date=aware(2024, 12, 30, 10, 0)),
        ]
        service = EventService(InMemoryEventStore(events))

        result = service.query(EventFilters(category="Music"), Pagination(page=1, limit=2))

        assert result.total == 3
        assert result.total_pages == 2
        assert [event.slug for event in result.items] == ["event-3", "event-1"]

    def test_date_range(self, event_service: EventService):
        """2024-12-10..2024-12-20 keeps the 15th and drops the 8th."""
        filters = EventFilters.from_params({"dateFrom": "2024-12-10", "dateTo": "2024-12-20"})
        slugs = [event.slug for event in event_service.query(filters).items]
        assert "tech-summit-2024" in slugs
        assert "startup-pitch-night" in slugs
        assert "art-exhibition-modern" not in slugs
        assert "music-festival-summer" not in slugs

    def test_filters_combine_with_and(self):
        """Each event that fails any one supplied filter is left out."""
        target = make_event(
            number=1, title="Jazz Night", category="Music", location=RIYADH, date=aware(2024, 12, 20, 20, 0)
        )
        events = [
            target,
            make_event(number=2, title="Rock Night", category="Music", location=RIYADH, date=aware(2024, 12, 20, 20, 0)),
            make_event(number=3, title="Jazz Talk", category="Business", location=RIYADH, date=aware(2024, 12, 20, 20, 0)),
            make_event(number=4, title="Jazz Dubai", category="Music", date=aware(2024, 12, 20, 20, 0)),
            make_event(number=5, title="Jazz Early", category="Music", location=RIYADH, date=aware(2024, 12, 1, 20, 0)),
        ]
        filters = EventFilters(search="jazz", category="Music", location="Riyadh", date_from=date(2024, 12, 10))

        result = EventService(InMemoryEventStore(events)).query(filters)

        assert list(result.items) == [target]
        assert all(matches(event, filters) for event in result.items)

    def test_every_filter_holds_on_the_seed_catalog(self, event_service: EventService):
        """Results of a multi-filter query satisfy each filter on its own."""
        filters = EventFilters(
            search="e", category="Technology", location="Saudi Arabia", date_from=date(2025, 1, 1)
        )

        result = event_service.query(filters)

        assert [event.slug for event in result.items] == ["ai-conference-riyadh"]
        for event in result.items:
            assert "e" in event.title.lower()
            assert event.category == "Technology"
            assert "saudi arabia" in event.location.city_country.lower()
            assert timezone.localdate(event.date) >= date(2025, 1, 1)

    @pytest.mark.parametrize("limit", range(1, 12))
    def test_pages_concatenate_to_the_full_result(self, event_service: EventService, limit):
        """Walking every page in order yields each matching event exactly once."""
        full = event_service.query(EventFilters(), Pagination(page=1, limit=100))

        collected = []
        page = 1
        while True:
            result = event_service.query(EventFilters(), Pagination(page=page, limit=limit))
            if not result.items:
                break
            collected.extend(result.items)
            page += 1

        assert collected == list(full.items)
        assert page - 1 == full.total_pages
        assert len({event.id for event in collected}) == len(collected)

    def test_query_is_idempotent(self, event_service: EventService):
        """The same query twice returns equal pages."""
        filters = EventFilters(category="Music")
        pagination = Pagination(page=1, limit=1)

        assert event_service.query(filters, pagination) == event_service.query(filters, pagination)

    def test_page_past_the_end_is_empty(self, event_service: EventService):
        """A page beyond the last is empty but still reports the total."""
        result = event_service.query(EventFilters(), Pagination(page=5, limit=6))
        assert result.items == ()
        assert result.total == 10
        assert result.total_pages == 2

    def test_no_matches(self, event_service: EventService):
        """No matches gives zero total and zero pages."""
        result = event_service.query(EventFilters(search="nothing like this"))
        assert result.total == 0
        assert result.total_pages == 0

    def test_equal_dates_keep_catalog_order(self):
        """Events on the same date stay in catalog order."""
        when = aware(2025, 1, 1, 12, 0)
        events = [make_event(number=n, date=when) for n in (3, 1, 2)]
        result = EventService(InMemoryEventStore(events)).query()
        assert [event.id for event in result.items] == ["3", "1", "2"]

    def test_query_does_not_change_the_store(self, event_service: EventService, seed_store):
        """Querying never modifies the catalog."""
        before = seed_store.list_events()
        event_service.query(EventFilters(category="Music"), Pagination(page=1, limit=1))
        assert seed_store.list_events() == before


class TestEventServiceLookups:
    """Tests for get_event and the listing helpers."""

    def test_get_event(self, event_service: EventService):
        """get_event returns the event with the given slug."""
        assert event_service.get_event("jazz-evening-doha").price == Price(Decimal("75.5"))

    def test_get_event_not_found_raises_error(self, event_service: EventService):
        """get_event raises EventNotFoundError for an unknown slug."""
        with pytest.raises(EventNotFoundError):
            event_service.get_event("no-such-event")

    def test_featured(self, event_service: EventService):
        """Featured events come back in catalog order."""
        slugs = [event.slug for event in event_service.list_featured()]
        assert slugs == ["tech-summit-2024", "music-festival-summer", "art-exhibition-modern"]

    def test_featured_limit(self, seed_store):
        """The featured list is capped at the configured limit."""
        assert len(EventService(seed_store, featured_limit=1).list_featured()) == 1

    def test_categories_are_distinct_and_sorted(self, event_service: EventService):
        """Categories are unique and alphabetical."""
        categories = event_service.list_categories()
        assert categories == sorted(set(categories))
        assert "Music" in categories

    def test_locations(self, event_service: EventService):
        """Locations are "City, Country" strings."""
        assert "Dubai, United Arab Emirates" in event_service.list_locations()

    def test_latency_is_simulated(self, seed_store):
        """Configured latency is waited out once per query."""
        waits = []
        service = EventService(seed_store, network=SimulatedNetwork(latency_seconds=0.5, sleep=waits.append))
        service.query()
        assert waits == [0.5]


class TestBookingService:
    """Tests for BookingService.book_ticket."""

    def test_success_issues_snapshot_ticket(self, booking_service: BookingService, valid_submission):
        """A successful booking copies event and attendee details onto the ticket."""
        result = booking_service.book_ticket("tech-summit-2024", valid_submission)

        assert result.success
        ticket = result.ticket
        assert ticket.id == "ticket-test-1"
        assert ticket.event_id == "1"
        assert ticket.event_title == "Tech Summit 2024"
        assert ticket.event_location.city == "Dubai"
        assert ticket.attendee_name == "Sara Khan"
        assert ticket.attendee_email == "sara.khan@example.com"
        assert ticket.price == Price(Decimal("299"))
        assert ticket.booking_date == BOOKED_AT

    def test_success_stores_ticket_and_takes_a_seat(
        self, booking_service: BookingService, seed_store, ticket_store, valid_submission
    ):
        """A successful booking stores the ticket and adds one attendee."""
        before = seed_store.get_event_by_slug("tech-summit-2024").capacity.attendee_count

        result = booking_service.book_ticket("tech-summit-2024", valid_submission)

        assert ticket_store.list_tickets() == [result.ticket]
        assert seed_store.get_event_by_slug("tech-summit-2024").capacity.attendee_count == before + 1

    def test_fully_booked(self, booking_service: BookingService, ticket_store, valid_submission):
        """A full event is refused and no ticket is stored."""
        result = booking_service.book_ticket("startup-pitch-night", valid_submission)

        assert not result.success
        assert result.code is ErrorCode.EVENT_FULLY_BOOKED
        assert result.error == "This event is fully booked."
        assert result.field_errors == {}
        assert ticket_store.list_tickets() == []

    def test_event_not_found(self, booking_service: BookingService, ticket_store, valid_submission):
        """An unknown slug is refused and no ticket is stored."""
        result = booking_service.book_ticket("no-such-event", valid_submission)

        assert not result.success
        assert result.code is ErrorCode.EVENT_NOT_FOUND
        assert result.error == "Event not found."
        assert result.field_errors == {}
        assert ticket_store.list_tickets() == []

    def test_invalid_submission_reports_every_field(self, booking_service: BookingService, ticket_store):
        """Validation failures list a message key for each bad field."""
        result = booking_service.book_ticket(
            "tech-summit-2024",
            {"name": "", "email": "not-an-email", "mobile": "abc", "date": ""},
        )

        assert not result.success
        assert result.code is ErrorCode.BOOKING_INVALID
        assert result.field_errors == {
            "name": "nameRequired",
            "email": "emailInvalid",
            "mobile": "mobileInvalid",
            "date": "dateRequired",
        }
        assert ticket_store.list_tickets() == []

    def test_last_seat(self, seed_store, ticket_store, valid_submission):
        """The last seat can be booked once, then the event is full."""
        store = InMemoryEventStore([make_event(capacity=Capacity(99, 100))])
        service = BookingService(store, ticket_store)

        first = service.book_ticket("event-1", valid_submission)
        second = service.book_ticket("event-1", valid_submission)

        assert first.success
        assert second.code is ErrorCode.EVENT_FULLY_BOOKED
        assert store.get_event_by_slug("event-1").is_fully_booked
        assert len(ticket_store.list_tickets()) == 1

    def test_concurrent_bookings_stop_at_capacity(self, ticket_store, valid_submission):
        """Parallel bookings for the last seats never oversell the event."""
        store = InMemoryEventStore([make_event(capacity=Capacity(90, 100))])
        service = BookingService(store, ticket_store)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: service.book_ticket("event-1", valid_submission), range(50)))

        successes = [result for result in results if result.success]
        refusals = [result for result in results if not result.success]
        assert len(successes) == 10
        assert all(result.code is ErrorCode.EVENT_FULLY_BOOKED for result in refusals)
        assert store.get_event_by_slug("event-1").capacity == Capacity(100, 100)
        assert len(ticket_store.list_tickets()) == 10

    def test_simulated_failure_changes_nothing(self, seed_store, ticket_store, valid_submission):
        """A simulated outage leaves the catalog and tickets untouched."""
        network = SimulatedNetwork(failure_rate=1.0, rng=random.Random(0))
        service = BookingService(seed_store, ticket_store, network=network)
        before = seed_store.get_event_by_slug("tech-summit-2024")

        result = service.book_ticket("tech-summit-2024", valid_submission)

        assert result.code is ErrorCode.BOOKING_UNAVAILABLE
        assert result.error == "Network error. Please try again later."
        assert seed_store.get_event_by_slug("tech-summit-2024") == before
        assert ticket_store.list_tickets() == []

    def test_ticket_ids_are_unique_by_default(self, seed_store, valid_submission):
        """Default ticket ids are unique and prefixed with "ticket-"."""
        service = BookingService(seed_store, InMemoryTicketStore())
        first = service.book_ticket("tech-summit-2024", valid_submission)
        second = service.book_ticket("tech-summit-2024", valid_submission)
        assert first.ticket.id != second.ticket.id
        assert first.ticket.id.startswith("ticket-")

    def test_booking_date_defaults_to_now(self, seed_store, valid_submission):
        """Without a clock the booking date is the current time."""
        service = BookingService(seed_store, InMemoryTicketStore())
        before = timezone.now()
        ticket = service.book_ticket("tech-summit-2024", valid_submission).ticket
        assert isinstance(ticket.booking_date, datetime)
        assert ticket.booking_date >= before
