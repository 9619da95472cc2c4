"""Serializers for booking requests and ticket responses."""

from rest_framework import serializers

from events.handlers.serializers import LocationSerializer, PriceField


class BookingRequestSerializer(serializers.Serializer):
    """Input shape only. Field rules are checked by the booking workflow."""

    name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")
    mobile = serializers.CharField(required=False, allow_blank=True, default="")
    date = serializers.CharField(required=False, allow_blank=True, default="")


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.CharField()
    eventId = serializers.CharField(source="event_id")
    eventSlug = serializers.CharField(source="event_slug")
    eventTitle = serializers.CharField(source="event_title")
    eventDate = serializers.DateTimeField(source="event_date")
    eventLocation = LocationSerializer(source="event_location")
    attendeeName = serializers.CharField(source="attendee_name")
    attendeeEmail = serializers.CharField(source="attendee_email")
    attendeeMobile = serializers.CharField(source="attendee_mobile")
    bookingDate = serializers.DateTimeField(source="booking_date")
    price = PriceField()


class BookingResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    ticket = TicketSerializer(allow_null=True)
    error = serializers.CharField(allow_null=True)
    code = serializers.SerializerMethodField()
    fieldErrors = serializers.DictField(source="field_errors", child=serializers.CharField())

    def get_code(self, result):
        return result.code.value if result.code else None
