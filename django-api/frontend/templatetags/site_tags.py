"""Template tags for localized text, dates and prices, and JSON-LD blocks."""

import json
from datetime import datetime
from typing import Any

from django import template
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from events.domain import Price

register = template.Library()

_JSON_SCRIPT_ESCAPES = {
    ord(">"): "\\u003E",
    ord("<"): "\\u003C",
    ord("&"): "\\u0026",
}


@register.simple_tag(takes_context=True)
def t(context: template.Context, key: str, **params: Any) -> str:
    """Translate a catalog key for the current locale.

    Usage:
        {% load site_tags %}
        {% t "common.seatsLeft" count=event.capacity.remaining %}
    """
    catalog = context["catalog"]
    for name, value in params.items():
        if isinstance(value, int) and not isinstance(value, bool):
            params[name] = catalog.format.numerals(str(value))
    return catalog.t(key, **params)


@register.simple_tag(takes_context=True)
def long_date(context: template.Context, value: datetime | None) -> str:
    if value is None:
        return ""
    return context["catalog"].format.long_date(value)


@register.simple_tag(takes_context=True)
def short_date(context: template.Context, value: datetime | None) -> str:
    if value is None:
        return ""
    return context["catalog"].format.short_date(value)


@register.simple_tag(takes_context=True)
def event_time(context: template.Context, value: datetime | None) -> str:
    if value is None:
        return ""
    return context["catalog"].format.time(value)


@register.simple_tag(takes_context=True)
def price(context: template.Context, value: Price) -> str:
    return context["catalog"].price(value)


@register.simple_tag(takes_context=True)
def locale_url(context: template.Context, path: str) -> str:
    """Prefix a site path with the current locale: "/events/" -> "/en/events/"."""
    return f"/{context['locale']}{path}"


@register.filter(is_safe=True)
def jsonld(value: Any) -> SafeString:
    """Render a dict as a JSON-LD script element."""
    if not value:
        return mark_safe("")
    payload = json.dumps(value, ensure_ascii=False).translate(_JSON_SCRIPT_ESCAPES)
    return format_html('<script type="application/ld+json">{}</script>', mark_safe(payload))
