from django.contrib.sitemaps.views import sitemap
from django.urls import include, path

from frontend.sitemaps import SITEMAPS
from frontend.views import robots

urlpatterns = [
    path("api/", include("events.urls")),
    path("api/", include("tickets.urls")),
    path("sitemap.xml", sitemap, {"sitemaps": SITEMAPS}, name="sitemap"),
    path("robots.txt", robots, name="robots"),
    path("", include("frontend.urls")),
]
