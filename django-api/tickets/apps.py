from pathlib import Path

from django.apps import AppConfig, apps
from django.conf import settings

from events.services.simulation import SimulatedNetwork
from tickets.services.booking_service import BookingService
from tickets.stores.interfaces import TicketStore
from tickets.stores.memory_store import InMemoryTicketStore


class TicketsConfig(AppConfig):
    name = "tickets"

    store: TicketStore
    service: BookingService

    def ready(self) -> None:
        self.store = InMemoryTicketStore.from_fixture(Path(settings.TICKETS_SEED_PATH))
        self.service = BookingService(
            apps.get_app_config("events").store,
            self.store,
            network=SimulatedNetwork(
                latency_seconds=settings.SIMULATED_LATENCY_MS / 1000,
                failure_rate=settings.BOOKING_FAILURE_RATE,
            ),
        )
