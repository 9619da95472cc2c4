from events.handlers.views import (
    CategoryListView,
    EventDetailView,
    EventListView,
    FeaturedEventListView,
    LocationListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "FeaturedEventListView",
    "CategoryListView",
    "LocationListView",
]
