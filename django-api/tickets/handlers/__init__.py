from tickets.handlers.views import BookTicketView, TicketListView

__all__ = ["BookTicketView", "TicketListView"]
