"""Supported locales, locale resolution and the UI message catalog."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cache
from pathlib import Path
from typing import Any

from django.conf import settings
from django.http import HttpRequest

from frontend.formatting import LocaleFormat

LOCALES_DIR = Path(__file__).resolve().parent / "locales"


def supported_locales() -> list[str]:
    return [code for code, _name in settings.LANGUAGES]


def default_locale() -> str:
    return settings.LANGUAGE_CODE


def is_supported(code: str | None) -> bool:
    return code is not None and code in supported_locales()


def locale_from_path(path: str) -> str | None:
    """Return the locale segment of "/<locale>" or "/<locale>/...", if any."""
    segment = path.lstrip("/").split("/", 1)[0]
    return segment if is_supported(segment) else None


def strip_locale(path: str) -> str:
    """Drop a leading locale segment; "/en/events" -> "/events", "/en" -> "/"."""
    locale = locale_from_path(path)
    if locale is None:
        return path or "/"
    return path[len(locale) + 1 :] or "/"


def localize_path(path: str, locale: str) -> str:
    """Prefix a path with a locale, replacing any locale already there."""
    rest = strip_locale(path)
    return f"/{locale}" if rest == "/" else f"/{locale}{rest}"


def locale_from_accept_language(header: str | None) -> str | None:
    """First supported language in header order; q-values are not weighed."""
    if not header:
        return None
    for part in header.split(","):
        tag = part.split(";", 1)[0].strip().lower()
        if is_supported(tag):
            return tag
        primary = tag.split("-", 1)[0]
        if is_supported(primary):
            return primary
    return None


def preferred_locale(request: HttpRequest) -> str:
    """Locale for a request whose path carries none: cookie, header, default."""
    cookie = request.COOKIES.get(settings.LANGUAGE_COOKIE_NAME)
    if is_supported(cookie):
        return cookie
    return locale_from_accept_language(request.headers.get("Accept-Language")) or default_locale()


class _Params(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


@dataclass(frozen=True)
class Catalog:
    """One locale's formatting rules and UI messages."""

    code: str
    format: LocaleFormat
    messages: Mapping[str, Any] = field(default_factory=dict)
    fallback: "Catalog | None" = None

    def lookup(self, key: str) -> Any:
        node: Any = self.messages
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                node = None
                break
            node = node[part]
        if node is None and self.fallback is not None:
            return self.fallback.lookup(key)
        return node

    def t(self, key: str, **params: Any) -> str:
        """Translate a dotted key; unknown keys render as the key itself."""
        message = self.lookup(key)
        if not isinstance(message, str):
            return key
        if params:
            message = message.format_map(_Params({k: str(v) for k, v in params.items()}))
        return message

    def price(self, price) -> str:
        return self.format.price(price, self.t("common.free"))


def _read(code: str) -> dict[str, Any]:
    with open(LOCALES_DIR / f"{code}.json", encoding="utf-8") as f:
        return json.load(f)


@cache
def get_catalog(code: str) -> Catalog:
    if not is_supported(code):
        code = default_locale()
    data = _read(code)
    fallback = None if code == default_locale() else get_catalog(default_locale())
    return Catalog(
        code=code,
        format=LocaleFormat.from_dict(code, data["format"]),
        messages=data.get("messages", {}),
        fallback=fallback,
    )
