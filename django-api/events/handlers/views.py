"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import EventFilters, Pagination
from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import DomainErrorSerializer, EventPageSerializer, EventSerializer
from events.services import get_event_service

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_FULLY_BOOKED: status.HTTP_409_CONFLICT,
    ErrorCode.BOOKING_INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.BOOKING_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    return Response(
        DomainErrorSerializer(error).data,
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        filters = EventFilters.from_params(request.query_params)
        pagination = Pagination.from_params(
            request.query_params,
            default_limit=settings.EVENTS_PAGE_SIZE,
            max_limit=settings.EVENTS_MAX_PAGE_SIZE,
        )
        result = get_event_service().query(filters, pagination)
        return Response(EventPageSerializer(result).data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = get_event_service().get_event(slug)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data)


class FeaturedEventListView(APIView):
    """Handler for GET /api/events/featured"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list_featured()
        return Response(EventSerializer(events, many=True).data)


class CategoryListView(APIView):
    """Handler for GET /api/events/categories"""

    def get(self, request: Request) -> Response:
        return Response(get_event_service().list_categories())


class LocationListView(APIView):
    """Handler for GET /api/events/locations"""

    def get(self, request: Request) -> Response:
        return Response(get_event_service().list_locations())
