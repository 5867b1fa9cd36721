"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_ENUM = "INVALID_ENUM"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_DATE_TIME = "INVALID_DATE_TIME"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ID = "INVALID_ID"
    INVALID_SLUG = "INVALID_SLUG"
    EMPTY_COLLECTION = "EMPTY_COLLECTION"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    STORE_FAILURE = "STORE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Client-correctable input error. Raised before any write."""


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or blank."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=message or f"{field.capitalize()} is required",
        )
        self.field = field


class EmptyCollectionError(ValidationError):
    """Raised when agenda or tags have no usable items."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_COLLECTION,
            message=f"{field.capitalize()} must have at least one item",
        )
        self.field = field


class InvalidEnumError(ValidationError):
    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ENUM,
            message=f"{field.capitalize()} must be {', '.join(allowed[:-1])}, or {allowed[-1]}",
        )
        self.field = field


class InvalidTimeFormatError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_FORMAT,
            message="Time must be in HH:MM format (24-hour)",
        )


class InvalidDateTimeError(ValidationError):
    """Raised when date, time and timezone do not form a real instant."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_TIME,
            message="Invalid date, time, or timezone",
        )


class InvalidEmailError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message="Invalid email format",
        )


class InvalidIdError(ValidationError):
    """Raised when an event ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid event ID format",
        )


class InvalidSlugError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SLUG,
            message="Invalid slug parameter",
        )


class ConflictError(DomainError):
    """Input collides with stored state. Not retryable without changing input."""


class DuplicateSlugError(ConflictError):
    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message="An event with this title already exists on this date",
        )
        self.slug = slug


class DuplicateBookingError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOKING,
            message="You have already booked this event",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, lookup: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.lookup = lookup


class StoreError(DomainError):
    """Unexpected persistence failure. Detail stays in the logs."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message="Storage operation failed",
        )
        self.detail = detail
