"""Locale-aware formatting of dates, times and prices.

Each locale's rules (month names, day periods, digit glyphs, field order)
are data loaded from frontend/locales/<code>.json, so adding a locale never
means adding a branch here.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Self

from django.utils import timezone

from events.domain import Price


@dataclass(frozen=True)
class LocaleFormat:
    code: str
    name: str
    direction: str
    og_locale: str
    digits: str
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    am: str
    pm: str
    long_date_pattern: str
    short_date_pattern: str
    time_pattern: str
    price_pattern: str

    def __post_init__(self) -> None:
        if len(self.digits) != 10:
            raise ValueError(f"{self.code}: digits must list exactly ten glyphs")
        if len(self.months) != 12 or len(self.months_short) != 12:
            raise ValueError(f"{self.code}: twelve month names are required")

    @classmethod
    def from_dict(cls, code: str, data: Mapping[str, Any]) -> Self:
        return cls(
            code=code,
            name=data["name"],
            direction=data.get("direction", "ltr"),
            og_locale=data["ogLocale"],
            digits=data.get("digits", "0123456789"),
            months=tuple(data["months"]),
            months_short=tuple(data["monthsShort"]),
            am=data["dayPeriods"]["am"],
            pm=data["dayPeriods"]["pm"],
            long_date_pattern=data["longDate"],
            short_date_pattern=data["shortDate"],
            time_pattern=data["time"],
            price_pattern=data["price"],
        )

    @property
    def is_rtl(self) -> bool:
        return self.direction == "rtl"

    def numerals(self, text: str) -> str:
        """Swap ASCII digits for this locale's digit glyphs."""
        return text.translate(str.maketrans("0123456789", self.digits))

    def _date_fields(self, value: datetime) -> dict[str, str]:
        local = timezone.localtime(value) if timezone.is_aware(value) else value
        return {
            "day": str(local.day),
            "month": self.months[local.month - 1],
            "monthShort": self.months_short[local.month - 1],
            "year": str(local.year),
        }

    def long_date(self, value: datetime) -> str:
        """e.g. "December 15, 2024"."""
        return self.numerals(self.long_date_pattern.format(**self._date_fields(value)))

    def short_date(self, value: datetime) -> str:
        """e.g. "Dec 15, 2024"."""
        return self.numerals(self.short_date_pattern.format(**self._date_fields(value)))

    def time(self, value: datetime) -> str:
        """12-hour clock, e.g. "4:00 PM"."""
        local = timezone.localtime(value) if timezone.is_aware(value) else value
        hour = local.hour % 12 or 12
        text = self.time_pattern.format(
            hour=hour,
            minute=f"{local.minute:02d}",
            period=self.am if local.hour < 12 else self.pm,
        )
        return self.numerals(text)

    def amount(self, amount: Decimal) -> str:
        if amount == amount.to_integral_value():
            text = f"{int(amount)}"
        else:
            text = f"{amount:.2f}"
        return self.numerals(text)

    def price(self, price: Price, free_label: str) -> str:
        if price.is_free:
            return free_label
        return self.price_pattern.format(amount=self.amount(price.amount))
