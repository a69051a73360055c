"""Domain error codes for the roomescape module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    THEME_NOT_FOUND = "THEME_NOT_FOUND"
    TIME_NOT_FOUND = "TIME_NOT_FOUND"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"
    THEME_IN_USE = "THEME_IN_USE"
    TIME_IN_USE = "TIME_IN_USE"
    STORAGE_FAILURE = "STORAGE_FAILURE"


class ResourceKind(Enum):
    """Kinds of resource a NotFoundError can refer to."""

    THEME = "Theme"
    TIME = "Time"
    RESERVATION = "Reservation"


class ConflictKind(Enum):
    """Kinds of state conflict."""

    DUPLICATE_BOOKING = "DuplicateBooking"
    THEME_IN_USE = "ThemeInUse"
    TIME_IN_USE = "TimeInUse"


_NOT_FOUND_CODES = {
    ResourceKind.THEME: (ErrorCode.THEME_NOT_FOUND, "Theme not found"),
    ResourceKind.TIME: (ErrorCode.TIME_NOT_FOUND, "Reservation time not found"),
    ResourceKind.RESERVATION: (ErrorCode.RESERVATION_NOT_FOUND, "Reservation not found"),
}

_CONFLICT_CODES = {
    ConflictKind.DUPLICATE_BOOKING: (
        ErrorCode.DUPLICATE_BOOKING,
        "This theme is already reserved for the given date and time",
    ),
    ConflictKind.THEME_IN_USE: (
        ErrorCode.THEME_IN_USE,
        "Theme is referenced by existing reservations",
    ),
    ConflictKind.TIME_IN_USE: (
        ErrorCode.TIME_IN_USE,
        "Reservation time is referenced by existing reservations",
    ),
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when raw input cannot form a valid domain value."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.field = field


class NotFoundError(DomainError):
    """Raised when a referenced theme, time or reservation does not exist."""

    def __init__(self, kind: ResourceKind, resource_id: object) -> None:
        code, message = _NOT_FOUND_CODES[kind]
        super().__init__(code=code, message=message)
        self.kind = kind
        self.resource_id = resource_id


class ConflictError(DomainError):
    """Raised when an operation would break a booking invariant."""

    def __init__(self, kind: ConflictKind) -> None:
        code, message = _CONFLICT_CODES[kind]
        super().__init__(code=code, message=message)
        self.kind = kind


class StorageError(DomainError):
    """Raised when the persistence layer fails (connection, timeout, ...)."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_FAILURE,
            message="Storage is temporarily unavailable",
        )
        self.operation = operation
