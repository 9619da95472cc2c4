from pathlib import Path

from django.apps import AppConfig
from django.conf import settings

from events.services.event_service import EventService
from events.services.simulation import SimulatedNetwork
from events.stores.interfaces import EventStore
from events.stores.memory_store import InMemoryEventStore


class EventsConfig(AppConfig):
    name = "events"

    store: EventStore
    service: EventService

    def ready(self) -> None:
        # One store per process, shared by the query engine and the booking workflow.
        self.store = InMemoryEventStore.from_fixture(Path(settings.EVENTS_SEED_PATH))
        self.service = EventService(
            self.store,
            network=SimulatedNetwork(latency_seconds=settings.SIMULATED_LATENCY_MS / 1000),
            featured_limit=settings.FEATURED_EVENTS_LIMIT,
        )
