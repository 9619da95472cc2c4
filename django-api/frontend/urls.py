from django.urls import path, register_converter

from frontend import views
from frontend.i18n import supported_locales


class LocaleConverter:
    """Matches one of the supported locale codes."""

    def __init__(self) -> None:
        self.regex = "|".join(supported_locales())

    def to_python(self, value: str) -> str:
        return value

    def to_url(self, value: str) -> str:
        return value


register_converter(LocaleConverter, "locale")

urlpatterns = [
    path("<locale:locale>/", views.home, name="home"),
    path("<locale:locale>/switch/", views.switch_locale, name="switch-locale"),
    path("<locale:locale>/events/", views.event_list, name="events"),
    path("<locale:locale>/events/more/", views.event_list_more, name="events-more"),
    path("<locale:locale>/events/<slug:slug>/", views.event_detail, name="event"),
    path("<locale:locale>/events/<slug:slug>/book/", views.book_event, name="book"),
    path("<locale:locale>/tickets/", views.ticket_list, name="tickets"),
    path("<locale:locale>/tickets/<str:ticket_id>/print/", views.ticket_print, name="ticket-print"),
]
