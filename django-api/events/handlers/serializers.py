"""Serializers for transforming domain models to API responses.

Keys are camelCase to match what the site's scripts consume.
"""

from rest_framework import serializers


class PriceField(serializers.Field):
    """A number, or the string "free"."""

    def to_representation(self, value):
        return value.to_raw()


class LocationSerializer(serializers.Serializer):
    venue = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    country = serializers.CharField()


class OrganizerSerializer(serializers.Serializer):
    name = serializers.CharField()
    avatar = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    slug = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    longDescription = serializers.CharField(source="long_description")
    date = serializers.DateTimeField()
    endDate = serializers.DateTimeField(source="end_date", allow_null=True)
    location = LocationSerializer()
    category = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    imageUrl = serializers.CharField(source="image_url")
    price = PriceField()
    attendeeCount = serializers.IntegerField(source="capacity.attendee_count")
    maxAttendees = serializers.IntegerField(source="capacity.max_attendees")
    organizer = OrganizerSerializer()
    featured = serializers.BooleanField()
    createdAt = serializers.DateTimeField(source="created_at")


class EventPageSerializer(serializers.Serializer):
    """Serializer for one page of query results."""

    events = EventSerializer(source="items", many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    totalPages = serializers.IntegerField(source="total_pages")


class DomainErrorSerializer(serializers.Serializer):
    code = serializers.CharField(source="code.value")
    message = serializers.CharField()
