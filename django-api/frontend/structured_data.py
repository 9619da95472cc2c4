"""schema.org JSON-LD builders for events, bookings and tickets."""

from collections.abc import Sequence
from typing import Any

from events.domain import Event, Location, Organizer, Price
from tickets.domain import Ticket

SCHEMA_CONTEXT = "https://schema.org"
IN_STOCK = "https://schema.org/InStock"
SOLD_OUT = "https://schema.org/SoldOut"
EVENT_SCHEDULED = "https://schema.org/EventScheduled"
OFFLINE_ATTENDANCE = "https://schema.org/OfflineEventAttendanceMode"
PRICE_CURRENCY = "USD"
DEFAULT_MAX_ITEMS = 10


def _schema_price(price: Price) -> str:
    return "0" if price.is_free else str(price.to_raw())


def booking_url(event: Event, locale: str, base_url: str) -> str:
    return f"{base_url}/{locale}/events/{event.slug}/book/"


def build_place(location: Location, street_address: bool = True) -> dict[str, Any]:
    address: dict[str, Any] = {"@type": "PostalAddress"}
    if street_address:
        address["streetAddress"] = location.venue
    address.update(
        addressLocality=location.city,
        addressRegion=location.state,
        addressCountry=location.country,
    )
    return {"@type": "Place", "name": location.venue, "address": address}


def build_organization(organizer: Organizer) -> dict[str, Any]:
    return {"@type": "Organization", "name": organizer.name}


def build_offer(
    event: Event,
    locale: str,
    base_url: str,
    include_valid_from: bool = False,
) -> dict[str, Any]:
    offer = {
        "@type": "Offer",
        "price": _schema_price(event.price),
        "priceCurrency": PRICE_CURRENCY,
        "availability": SOLD_OUT if event.is_fully_booked else IN_STOCK,
        "url": booking_url(event, locale, base_url),
    }
    if include_valid_from:
        offer["validFrom"] = event.created_at.isoformat()
    return offer


def build_event(
    event: Event,
    locale: str,
    base_url: str,
    *,
    include_event_status: bool = False,
    include_attendance_mode: bool = False,
    include_performer: bool = False,
    include_valid_from: bool = False,
) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "@type": "Event",
        "name": event.title,
        "description": event.description,
        "startDate": event.date.isoformat(),
        "endDate": (event.end_date or event.date).isoformat(),
    }
    if include_event_status:
        schema["eventStatus"] = EVENT_SCHEDULED
    if include_attendance_mode:
        schema["eventAttendanceMode"] = OFFLINE_ATTENDANCE
    schema.update(
        location=build_place(event.location),
        image=event.image_url,
        organizer=build_organization(event.organizer),
        offers=build_offer(event, locale, base_url, include_valid_from=include_valid_from),
    )
    if include_performer:
        schema["performer"] = build_organization(event.organizer)
    return schema


def build_event_page(event: Event, locale: str, base_url: str) -> dict[str, Any]:
    """Full Event object for an event detail page."""
    return {
        "@context": SCHEMA_CONTEXT,
        **build_event(
            event,
            locale,
            base_url,
            include_event_status=True,
            include_attendance_mode=True,
            include_performer=True,
            include_valid_from=True,
        ),
    }


def build_event_reservation(event: Event, locale: str, base_url: str) -> dict[str, Any]:
    return {
        "@type": "EventReservation",
        "reservationFor": build_event(event, locale, base_url),
    }


def build_reservation_action(event: Event, locale: str, base_url: str) -> dict[str, Any]:
    """ReservationAction for a booking page."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ReservationAction",
        "target": build_event_reservation(event, locale, base_url),
        "object": {"@type": "Ticket", "name": f"Ticket for {event.title}"},
    }


def build_list_event(event: Event, locale: str, base_url: str) -> dict[str, Any]:
    """Slim Event for list items: no organizer, no street address."""
    return {
        "@type": "Event",
        "name": event.title,
        "description": event.description,
        "startDate": event.date.isoformat(),
        "endDate": (event.end_date or event.date).isoformat(),
        "location": build_place(event.location, street_address=False),
        "image": event.image_url,
        "offers": {
            "@type": "Offer",
            "price": _schema_price(event.price),
            "priceCurrency": PRICE_CURRENCY,
            "url": booking_url(event, locale, base_url),
        },
    }


def _collection_page(
    name: str,
    description: str,
    url: str,
    number_of_items: int,
    items: Sequence[dict[str, Any]],
) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "CollectionPage",
        "name": name,
        "description": description,
        "url": url,
        "mainEntity": {
            "@type": "ItemList",
            "numberOfItems": number_of_items,
            "itemListElement": [
                {"@type": "ListItem", "position": position, "item": item}
                for position, item in enumerate(items, start=1)
            ],
        },
    }


def build_events_collection_page(
    events: Sequence[Event],
    total: int,
    locale: str,
    base_url: str,
    *,
    name: str,
    description: str,
    url: str,
    max_items: int = DEFAULT_MAX_ITEMS,
) -> dict[str, Any]:
    items = [build_list_event(event, locale, base_url) for event in events[:max_items]]
    return _collection_page(name, description, url, total, items)


def build_ticket(ticket: Ticket) -> dict[str, Any]:
    return {
        "@type": "Ticket",
        "name": f"Ticket for {ticket.event_title}",
        "description": f"Ticket for {ticket.event_title} on {ticket.event_date.date().isoformat()}",
    }


def build_tickets_collection_page(
    tickets: Sequence[Ticket],
    *,
    name: str,
    description: str,
    url: str,
    max_items: int = DEFAULT_MAX_ITEMS,
) -> dict[str, Any]:
    items = [build_ticket(ticket) for ticket in tickets[:max_items]]
    return _collection_page(name, description, url, len(tickets), items)
