"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from tickets.domain import Ticket


class TicketStore(ABC):
    """Interface for issued ticket persistence. Append-only."""

    @abstractmethod
    def add(self, ticket: Ticket) -> None:
        """Append a newly issued ticket."""
        ...

    @abstractmethod
    def list_tickets(self) -> list[Ticket]:
        """Return all tickets in the order they were issued."""
        ...

    @abstractmethod
    def get_ticket(self, ticket_id: str) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...
