from tickets.domain.models import BookingResult, BookingSubmission, Ticket

__all__ = [
    "Ticket",
    "BookingSubmission",
    "BookingResult",
]
