from events.domain.filters import EventFilters, Pagination
from events.domain.models import Event, EventPage
from events.domain.value_objects import FREE, Capacity, Location, Organizer, Price

__all__ = [
    "Event",
    "EventPage",
    "EventFilters",
    "Pagination",
    "Location",
    "Organizer",
    "Price",
    "Capacity",
    "FREE",
]
