from django.apps import apps

from tickets.services.booking_service import BookingService


def get_booking_service() -> BookingService:
    """Return the process-wide service built at startup."""
    return apps.get_app_config("tickets").service


__all__ = ["BookingService", "get_booking_service"]
