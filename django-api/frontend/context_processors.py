from django.conf import settings
from django.http import HttpRequest
from django.utils.http import urlencode

from frontend.i18n import get_catalog, localize_path, strip_locale, supported_locales


def site(request: HttpRequest) -> dict:
    """Locale catalog and site-wide values for every page template."""
    locale = getattr(request, "LANGUAGE_CODE", None) or settings.LANGUAGE_CODE
    catalog = get_catalog(locale)
    current = strip_locale(request.path_info)
    if request.META.get("QUERY_STRING"):
        current = f"{current}?{request.META['QUERY_STRING']}"
    switch_links = [
        {
            "code": code,
            "name": get_catalog(code).format.name,
            "url": f"{localize_path('/switch/', code)}?{urlencode({'next': current})}",
            "active": code == catalog.code,
        }
        for code in supported_locales()
    ]
    return {
        "locale": catalog.code,
        "catalog": catalog,
        "direction": catalog.format.direction,
        "site_name": settings.SITE_NAME,
        "base_url": settings.SITE_BASE_URL,
        "locale_links": switch_links,
    }
