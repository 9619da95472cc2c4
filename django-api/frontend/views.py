"""Server-rendered site pages.

Like the API handlers, page views only parse the request, call services and
render; the locale comes from LocaleRedirectMiddleware via the URL.
"""

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse, HttpResponseRedirect
from django.shortcuts import render
from django.utils.http import url_has_allowed_host_and_scheme, urlencode
from django.views.decorators.http import require_GET, require_http_methods

from events.domain import Event, EventFilters, Pagination
from events.domain.errors import EventNotFoundError
from events.services import get_event_service
from frontend import structured_data
from frontend.i18n import Catalog, get_catalog, localize_path
from frontend.metadata import build_page_metadata
from frontend.printing import render_ticket_html
from frontend.sitemaps import robots_txt
from tickets.services import get_booking_service


def _accumulated_listing(filters: EventFilters, page: int) -> tuple[list[Event], int, bool]:
    """Pages 1..page of the listing, as "load more" would have built them."""
    size = settings.LISTING_PAGE_SIZE
    result = get_event_service().query(filters, Pagination(page=1, limit=size * page))
    has_more = page * size < result.total
    return list(result.items), result.total, has_more


def _page_number(request: HttpRequest) -> int:
    return Pagination.from_params(request.GET, default_limit=settings.LISTING_PAGE_SIZE).page


def _not_found(request: HttpRequest, catalog: Catalog) -> HttpResponse:
    metadata = build_page_metadata(
        title=f"{catalog.t('errors.notFoundTitle')} | {settings.SITE_NAME}",
        description=catalog.t("errors.notFoundMessage"),
        locale=catalog.code,
        url=request.path,
        robots_index=False,
    )
    return render(request, "frontend/not_found.html", {"metadata": metadata}, status=404)


@require_GET
def home(request: HttpRequest, locale: str) -> HttpResponse:
    return HttpResponseRedirect(f"/{locale}/events/")


@require_GET
def switch_locale(request: HttpRequest, locale: str) -> HttpResponse:
    """Remember the chosen locale and show the same page in it."""
    next_path = request.GET.get("next", "/events/")
    if not url_has_allowed_host_and_scheme(next_path, allowed_hosts=None) or not next_path.startswith("/"):
        next_path = "/events/"
    response = HttpResponseRedirect(localize_path(next_path, locale))
    response.set_cookie(
        settings.LANGUAGE_COOKIE_NAME,
        locale,
        max_age=settings.LANGUAGE_COOKIE_AGE,
        path="/",
        samesite="Lax",
    )
    return response


@require_GET
def event_list(request: HttpRequest, locale: str) -> HttpResponse:
    catalog = get_catalog(locale)
    service = get_event_service()
    filters = EventFilters.from_params(request.GET)
    page = _page_number(request)
    events, total, has_more = _accumulated_listing(filters, page)

    url = f"/{locale}/events/"
    title = f"{catalog.t('events.title')} | {settings.SITE_NAME}"
    description = f"{catalog.t('events.upcomingEvents')} - {catalog.t('meta.eventsDescription')}"
    metadata = build_page_metadata(
        title=title,
        description=description,
        keywords=catalog.lookup("meta.keywords"),
        locale=locale,
        url=url,
        image_url=events[0].image_url if events else None,
        image_alt=catalog.t("events.title"),
    )
    jsonld = structured_data.build_events_collection_page(
        events,
        total,
        locale,
        settings.SITE_BASE_URL,
        name=catalog.t("events.title"),
        description=catalog.t("events.upcomingEvents"),
        url=f"{settings.SITE_BASE_URL}{url}",
    )
    filter_params = filters.to_params()
    return render(
        request,
        "frontend/events_list.html",
        {
            "metadata": metadata,
            "jsonld": jsonld,
            "events": events,
            "total": total,
            "page": page,
            "has_more": has_more,
            "filters": filters,
            "filter_values": filter_params,
            "next_page_query": urlencode({**filter_params, "page": page + 1}),
            "categories": service.list_categories(),
            "locations": service.list_locations(),
            "featured_events": service.list_featured() if filters.is_empty else [],
        },
    )


@require_GET
def event_list_more(request: HttpRequest, locale: str) -> HttpResponse:
    """One further page of cards, appended in place by the "load more" script."""
    filters = EventFilters.from_params(request.GET)
    page = _page_number(request)
    result = get_event_service().query(filters, Pagination(page=page, limit=settings.LISTING_PAGE_SIZE))
    response = render(
        request,
        "frontend/_event_cards.html",
        {"events": result.items},
    )
    response.headers["X-Has-More"] = "true" if result.has_next else "false"
    response.headers["X-Next-Page"] = str(page + 1)
    return response


@require_GET
def event_detail(request: HttpRequest, locale: str, slug: str) -> HttpResponse:
    catalog = get_catalog(locale)
    try:
        event = get_event_service().get_event(slug)
    except EventNotFoundError:
        return _not_found(request, catalog)

    metadata = build_page_metadata(
        title=f"{event.title} | {settings.SITE_NAME}",
        description=event.description,
        keywords=[event.category, *event.tags, event.location.city, event.location.country],
        locale=locale,
        url=f"/{locale}/events/{event.slug}/",
        image_url=event.image_url,
        image_alt=event.title,
    )
    jsonld = structured_data.build_event_page(event, locale, settings.SITE_BASE_URL)
    return render(
        request,
        "frontend/event_detail.html",
        {"metadata": metadata, "jsonld": jsonld, "event": event},
    )


@require_http_methods(["GET", "POST"])
def book_event(request: HttpRequest, locale: str, slug: str) -> HttpResponse:
    catalog = get_catalog(locale)
    try:
        event = get_event_service().get_event(slug)
    except EventNotFoundError:
        return _not_found(request, catalog)

    form_values: dict[str, str] = {}
    field_errors: dict[str, str] = {}
    banner = None

    if request.method == "POST":
        result = get_booking_service().book_ticket(slug, request.POST)
        if result.success:
            query = urlencode({"booked": result.ticket.id})
            return HttpResponseRedirect(f"/{locale}/tickets/?{query}")
        form_values = {key: request.POST.get(key, "") for key in ("name", "email", "mobile", "date")}
        field_errors = {
            field: catalog.t(f"booking.validation.{message_key}")
            for field, message_key in result.field_errors.items()
        }
        if not field_errors:
            banner = catalog.t(f"booking.error.{result.code.value}")
        # Capacity may have changed since the page was loaded
        event = get_event_service().get_event(slug)

    metadata = build_page_metadata(
        title=f"{catalog.t('booking.title')} - {event.title} | {settings.SITE_NAME}",
        description=catalog.t("meta.bookingDescription", title=event.title),
        locale=locale,
        url=f"/{locale}/events/{event.slug}/book/",
        image_url=event.image_url,
        image_alt=event.title,
    )
    jsonld = structured_data.build_reservation_action(event, locale, settings.SITE_BASE_URL)
    return render(
        request,
        "frontend/booking.html",
        {
            "metadata": metadata,
            "jsonld": jsonld,
            "event": event,
            "form_values": form_values,
            "field_errors": field_errors,
            "banner": banner,
        },
    )


@require_GET
def ticket_list(request: HttpRequest, locale: str) -> HttpResponse:
    catalog = get_catalog(locale)
    tickets = get_booking_service().list_tickets()
    url = f"/{locale}/tickets/"
    metadata = build_page_metadata(
        title=f"{catalog.t('tickets.title')} | {settings.SITE_NAME}",
        description=catalog.t("meta.ticketsDescription"),
        locale=locale,
        url=url,
        robots_index=False,
    )
    jsonld = structured_data.build_tickets_collection_page(
        tickets,
        name=catalog.t("tickets.title"),
        description=catalog.t("tickets.description"),
        url=f"{settings.SITE_BASE_URL}{url}",
    )
    booked_id = request.GET.get("booked")
    booked = get_booking_service().get_ticket(booked_id) if booked_id else None
    return render(
        request,
        "frontend/tickets.html",
        {"metadata": metadata, "jsonld": jsonld, "tickets": tickets, "booked": booked},
    )


@require_GET
def ticket_print(request: HttpRequest, locale: str, ticket_id: str) -> HttpResponse:
    ticket = get_booking_service().get_ticket(ticket_id)
    if ticket is None:
        raise Http404("Ticket not found")
    response = HttpResponse(render_ticket_html(ticket, get_catalog(locale)))
    response.headers["X-Robots-Tag"] = "noindex"
    return response


@require_GET
def robots(request: HttpRequest) -> HttpResponse:
    return HttpResponse(robots_txt(), content_type="text/plain")
