"""Event service - all catalog query logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from datetime import date, datetime

import structlog
from django.utils import timezone

from events.domain import Event, EventFilters, EventPage, Pagination
from events.domain.errors import EventNotFoundError
from events.services.simulation import SimulatedNetwork
from events.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)

DEFAULT_FEATURED_LIMIT = 3


def _within_lower(event: Event, bound: date | datetime) -> bool:
    if isinstance(bound, datetime):
        return event.date >= bound
    return timezone.localdate(event.date) >= bound


def _within_upper(event: Event, bound: date | datetime) -> bool:
    if isinstance(bound, datetime):
        return event.date <= bound
    return timezone.localdate(event.date) <= bound


def matches(event: Event, filters: EventFilters) -> bool:
    """True when the event satisfies every supplied constraint."""
    if filters.search is not None and filters.search.lower() not in event.title.lower():
        return False
    if filters.category is not None and event.category != filters.category:
        return False
    if filters.location is not None:
        needle = filters.location.lower()
        candidates = (
            event.location.city_country,
            event.location.city,
            event.location.country,
        )
        if not any(needle in candidate.lower() for candidate in candidates):
            return False
    if filters.date_from is not None and not _within_lower(event, filters.date_from):
        return False
    if filters.date_to is not None and not _within_upper(event, filters.date_to):
        return False
    if filters.featured is not None and event.featured != filters.featured:
        return False
    return True


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        network: SimulatedNetwork | None = None,
        featured_limit: int = DEFAULT_FEATURED_LIMIT,
    ) -> None:
        self._store = store
        self._network = network or SimulatedNetwork()
        self._featured_limit = featured_limit

    def query(
        self,
        filters: EventFilters | None = None,
        pagination: Pagination | None = None,
    ) -> EventPage:
        """Filter, sort by date and slice the catalog."""
        filters = filters or EventFilters()
        pagination = pagination or Pagination()
        self._network.wait()

        found = [event for event in self._store.list_events() if matches(event, filters)]
        # list.sort is stable, so equal dates keep catalog order
        found.sort(key=lambda event: event.date)
        items = found[pagination.offset : pagination.offset + pagination.limit]

        logger.debug(
            "events_queried",
            filters=filters.to_params(),
            page=pagination.page,
            limit=pagination.limit,
            total=len(found),
        )
        return EventPage(
            items=tuple(items),
            total=len(found),
            page=pagination.page,
            limit=pagination.limit,
        )

    def get_event(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        self._network.wait()
        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError(slug)
        return event

    def list_events(self) -> list[Event]:
        """Return every event in catalog order."""
        return self._store.list_events()

    def list_featured(self) -> list[Event]:
        self._network.wait()
        featured = [event for event in self._store.list_events() if event.featured]
        return featured[: self._featured_limit]

    def list_categories(self) -> list[str]:
        self._network.wait()
        return sorted({event.category for event in self._store.list_events()})

    def list_locations(self) -> list[str]:
        self._network.wait()
        return sorted({event.location.city_country for event in self._store.list_events()})
