"""Validation of raw booking form data."""

import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator
from django.utils.dateparse import parse_date

from tickets.domain.errors import BookingValidationError
from tickets.domain.models import BookingSubmission

# Optional "+", a 1-4 digit country code, separators, then up to 9 digits.
MOBILE_PATTERN = re.compile(
    r"^[+]?[(]?[0-9]{1,4}[)]?[-\s.]?[(]?[0-9]{1,4}[)]?[-\s.]?[0-9]{1,9}$"
)

_validate_email = EmailValidator()


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _parse_booking_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_date(value.strip())
    except ValueError:
        return None


def validate_submission(data: Mapping[str, Any]) -> BookingSubmission:
    """Check every field and return a BookingSubmission.

    Raises:
        BookingValidationError: With one message key per failing field.
    """
    errors: dict[str, str] = {}

    name = _text(data, "name")
    if not name:
        errors["name"] = "nameRequired"

    email = _text(data, "email")
    if not email:
        errors["email"] = "emailRequired"
    else:
        try:
            _validate_email(email)
        except ValidationError:
            errors["email"] = "emailInvalid"

    mobile = _text(data, "mobile")
    if not mobile:
        errors["mobile"] = "mobileRequired"
    elif not MOBILE_PATTERN.match(mobile):
        errors["mobile"] = "mobileInvalid"

    booking_date = _parse_booking_date(data.get("date"))
    if booking_date is None:
        errors["date"] = "dateRequired"

    if errors:
        raise BookingValidationError(errors)
    return BookingSubmission(name=name, email=email, mobile=mobile, date=booking_date)
