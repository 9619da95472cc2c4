"""Print-friendly ticket rendering."""

from django.template.loader import render_to_string

from frontend.i18n import Catalog
from tickets.domain import Ticket


def render_ticket_html(ticket: Ticket, catalog: Catalog) -> str:
    """Standalone HTML document for one ticket; opens the print dialog on load."""
    context = {
        "ticket": ticket,
        "catalog": catalog,
        "event_date": catalog.format.long_date(ticket.event_date),
        "booking_date": catalog.format.long_date(ticket.booking_date),
        "price": catalog.price(ticket.price),
        "labels": {
            key: catalog.t(f"print.{key}")
            for key in ("ticket", "eventDate", "location", "attendee", "email", "mobile", "price", "bookingDate")
        },
    }
    return render_to_string("frontend/ticket_print.html", context)
