from django.apps import apps

from events.services.event_service import EventService


def get_event_service() -> EventService:
    """Return the process-wide service built at startup."""
    return apps.get_app_config("events").service


__all__ = ["EventService", "get_event_service"]
