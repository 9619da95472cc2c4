from django.urls import path

from tickets.handlers import BookTicketView, TicketListView

urlpatterns = [
    path("events/<slug:slug>/book", BookTicketView.as_view(), name="event-book"),
    path("tickets", TicketListView.as_view(), name="ticket-list"),
]
