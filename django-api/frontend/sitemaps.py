"""Sitemap entries for every locale x page combination, and robots.txt."""

from dataclasses import dataclass
from datetime import datetime
from urllib.parse import urlsplit

from django.conf import settings
from django.contrib.sitemaps import Sitemap
from django.utils import timezone

from events.services import get_event_service
from frontend.i18n import supported_locales


@dataclass(frozen=True)
class SitemapEntry:
    path: str
    changefreq: str
    priority: float
    lastmod: datetime


def sitemap_entries() -> list[SitemapEntry]:
    now = timezone.now()
    locales = supported_locales()
    entries = []
    for locale in locales:
        entries.append(SitemapEntry(f"/{locale}/events/", "daily", 1.0, now))
        entries.append(SitemapEntry(f"/{locale}/tickets/", "weekly", 0.5, now))

    for event in get_event_service().list_events():
        for locale in locales:
            entries.append(SitemapEntry(f"/{locale}/events/{event.slug}/", "weekly", 0.9, event.created_at))
            entries.append(
                SitemapEntry(f"/{locale}/events/{event.slug}/book/", "monthly", 0.7, event.created_at)
            )
    return entries


class SiteSitemap(Sitemap):
    """All public pages, addressed on SITE_BASE_URL rather than the request host."""

    def items(self) -> list[SitemapEntry]:
        return sitemap_entries()

    def location(self, item: SitemapEntry) -> str:
        return item.path

    def lastmod(self, item: SitemapEntry) -> datetime:
        return item.lastmod

    def changefreq(self, item: SitemapEntry) -> str:
        return item.changefreq

    def priority(self, item: SitemapEntry) -> float:
        return item.priority

    def get_protocol(self, protocol: str | None = None) -> str:
        return urlsplit(settings.SITE_BASE_URL).scheme or "https"

    def get_domain(self, site=None) -> str:
        return urlsplit(settings.SITE_BASE_URL).netloc


SITEMAPS = {"site": SiteSitemap}


def robots_txt(base_url: str | None = None) -> str:
    base_url = (base_url if base_url is not None else settings.SITE_BASE_URL).rstrip("/")
    disallow = ["/api/"] + [f"/{locale}/tickets" for locale in supported_locales()]
    lines = ["User-agent: *", "Allow: /"]
    lines += [f"Disallow: {path}" for path in disallow]
    lines += ["", f"Sitemap: {base_url}/sitemap.xml", ""]
    return "\n".join(lines)
