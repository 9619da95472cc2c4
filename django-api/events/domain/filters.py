"""Filter and pagination parameters for event queries.

Parsing is lenient: anything malformed is treated as absent, never rejected.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Self

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 100

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _clean_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _parse_bound(value: Any) -> date | datetime | None:
    text = _clean_text(value)
    if text is None:
        return None
    try:
        # A bare date bounds whole days; parse_datetime would read it as midnight.
        parsed_date = parse_date(text)
        if parsed_date is not None:
            return parsed_date
        parsed_dt = parse_datetime(text)
        if parsed_dt is not None and timezone.is_naive(parsed_dt):
            parsed_dt = timezone.make_aware(parsed_dt)
        return parsed_dt
    except ValueError:
        # Well formed but impossible, e.g. 2024-02-30
        return None


def _parse_flag(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    text = _clean_text(value)
    if text is None:
        return None
    text = text.lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        text = _clean_text(value)
        if text is None:
            return None
        try:
            number = int(text)
        except ValueError:
            return None
    return number if number > 0 else None


@dataclass(frozen=True)
class EventFilters:
    """Constraints on an event listing. None means no constraint."""

    search: str | None = None
    category: str | None = None
    location: str | None = None
    date_from: date | datetime | None = None
    date_to: date | datetime | None = None
    featured: bool | None = None

    def __post_init__(self) -> None:
        # Blank text is the same as no constraint.
        for name in ("search", "category", "location"):
            object.__setattr__(self, name, _clean_text(getattr(self, name)))

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> Self:
        """Build filters from request parameters (camelCase, as sent by the site)."""
        return cls(
            search=params.get("search"),
            category=params.get("category"),
            location=params.get("location"),
            date_from=_parse_bound(params.get("dateFrom")),
            date_to=_parse_bound(params.get("dateTo")),
            featured=_parse_flag(params.get("featured")),
        )

    @property
    def is_empty(self) -> bool:
        return self == type(self)()

    def to_params(self) -> dict[str, str]:
        """Inverse of from_params, omitting absent values."""
        params: dict[str, str] = {}
        for key, value in (
            ("search", self.search),
            ("category", self.category),
            ("location", self.location),
        ):
            if value is not None:
                params[key] = value
        if self.date_from is not None:
            params["dateFrom"] = self.date_from.isoformat()
        if self.date_to is not None:
            params["dateTo"] = self.date_to.isoformat()
        if self.featured is not None:
            params["featured"] = "true" if self.featured else "false"
        return params


@dataclass(frozen=True)
class Pagination:
    """1-indexed page and page size."""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.limit < 1:
            raise ValueError("Limit must be positive")

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        default_limit: int = DEFAULT_PAGE_SIZE,
        max_limit: int = MAX_PAGE_SIZE,
    ) -> Self:
        page = _parse_positive_int(params.get("page")) or 1
        limit = _parse_positive_int(params.get("limit")) or default_limit
        return cls(page=page, limit=min(limit, max_limit))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
