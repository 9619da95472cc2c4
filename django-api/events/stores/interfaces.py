"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def reserve_seat(self, slug: str) -> Event:
        """Take one seat on an event as a single atomic step.

        Returns the event as it was before the seat was taken.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventFullyBookedError: If no seats are left.
        """
        ...
