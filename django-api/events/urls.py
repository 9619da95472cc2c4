from django.urls import path

from events.handlers import (
    CategoryListView,
    EventDetailView,
    EventListView,
    FeaturedEventListView,
    LocationListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/featured", FeaturedEventListView.as_view(), name="event-featured"),
    path("events/categories", CategoryListView.as_view(), name="event-categories"),
    path("events/locations", LocationListView.as_view(), name="event-locations"),
    path("events/<slug:slug>", EventDetailView.as_view(), name="event-detail"),
]
