"""Locale routing middleware for the site pages."""

import re
import typing as t

import structlog
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.utils import translation

from frontend.i18n import locale_from_path, preferred_locale

logger = structlog.get_logger(__name__)

EXCLUDED_PREFIXES = ("/api/", "/static/", "/favicon.ico", "/sitemap.xml", "/robots.txt")
ASSET_RE = re.compile(r"\.(ico|png|jpg|jpeg|svg|gif|webp|woff|woff2|ttf|eot|css|js)$", re.IGNORECASE)


def is_excluded(path: str) -> bool:
    return path == "/api" or path.startswith(EXCLUDED_PREFIXES) or bool(ASSET_RE.search(path))


class LocaleRedirectMiddleware:
    """Make every page URL carry a locale segment.

    Paths without one are redirected to "/<locale><path>" using the locale
    cookie, then Accept-Language, then the default. Paths with one get that
    locale activated for the request and reported in the X-Locale header.
    """

    def __init__(self, get_response: t.Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        path = request.path_info
        if is_excluded(path):
            return self.get_response(request)

        locale = locale_from_path(path)
        if locale is None:
            locale = preferred_locale(request)
            target = f"/{locale}" if path == "/" else f"/{locale}{path}"
            query = request.META.get("QUERY_STRING", "")
            if query:
                target = f"{target}?{query}"
            logger.debug("locale_redirect", path=path, locale=locale)
            return HttpResponseRedirect(target)

        translation.activate(locale)
        request.LANGUAGE_CODE = locale
        try:
            response = self.get_response(request)
        finally:
            translation.deactivate()
        response.headers["X-Locale"] = locale
        return response
