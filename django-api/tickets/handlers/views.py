"""HTTP handlers for booking and ticket listing."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.views import ERROR_STATUS
from tickets.handlers.serializers import (
    BookingRequestSerializer,
    BookingResultSerializer,
    TicketSerializer,
)
from tickets.services import get_booking_service


class BookTicketView(APIView):
    """Handler for POST /api/events/{slug}/book"""

    def post(self, request: Request, slug: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_booking_service().book_ticket(slug, serializer.validated_data)
        if result.success:
            response_status = status.HTTP_201_CREATED
        else:
            response_status = ERROR_STATUS.get(result.code, status.HTTP_400_BAD_REQUEST)
        return Response(BookingResultSerializer(result).data, status=response_status)


class TicketListView(APIView):
    """Handler for GET /api/tickets"""

    def get(self, request: Request) -> Response:
        tickets = get_booking_service().list_tickets()
        return Response(TicketSerializer(tickets, many=True).data)
