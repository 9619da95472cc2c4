"""Domain errors raised by the booking workflow."""

from events.domain.errors import DomainError, ErrorCode


class BookingValidationError(DomainError):
    """Raised when a booking submission has missing or malformed fields.

    field_errors maps each failing field to a message key, e.g. "emailInvalid".
    """

    field_errors: dict[str, str]

    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_INVALID,
            message="Please correct the highlighted fields.",
        )
        object.__setattr__(self, "field_errors", dict(field_errors))


class BookingUnavailableError(DomainError):
    """Raised when the booking backend fails transiently."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_UNAVAILABLE,
            message="Network error. Please try again later.",
        )
