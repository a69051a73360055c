"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Self

from roomescape.domain.errors import ValidationError

CLIENT_NAME_MAX_LENGTH = 20
THEME_NAME_MAX_LENGTH = 30
THEME_DESCRIPTION_MAX_LENGTH = 255
THUMBNAIL_MAX_LENGTH = 500

_ID_PATTERN = re.compile(r"[0-9]+")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _require_text(field: str, value: object, max_length: int) -> None:
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string")
    if not value.strip():
        raise ValidationError(field, f"{field} cannot be blank")
    if len(value) > max_length:
        raise ValidationError(field, f"{field} must be at most {max_length} characters")


@dataclass(frozen=True)
class _EntityId:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError("id", "id must be an integer")
        if self.value < 1:
            raise ValidationError("id", "id must be positive")

    @classmethod
    def parse(cls, raw: int | str) -> Self:
        """Build an id from an int or a decimal string."""
        if isinstance(raw, str):
            raw = raw.strip()
            if not _ID_PATTERN.fullmatch(raw):
                raise ValidationError("id", "Invalid id format")
            raw = int(raw)
        return cls(value=raw)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ThemeId(_EntityId):
    """Unique identifier for a Theme."""


@dataclass(frozen=True)
class ReservationTimeId(_EntityId):
    """Unique identifier for a ReservationTime."""


@dataclass(frozen=True)
class ReservationId(_EntityId):
    """Unique identifier for a Reservation."""


@dataclass(frozen=True)
class ClientName:
    """Name the reservation is booked under."""

    value: str

    def __post_init__(self) -> None:
        _require_text("name", self.value, CLIENT_NAME_MAX_LENGTH)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ReservationDate:
    """Calendar day of a reservation.

    Carries no past/future policy; the reservation service decides which
    dates are bookable.
    """

    value: date

    def __post_init__(self) -> None:
        # datetime is a date subclass
        if isinstance(self.value, datetime) or not isinstance(self.value, date):
            raise ValidationError("date", "date must be a calendar date")

    @classmethod
    def parse(cls, raw: date | str) -> Self:
        """Build from a date or an ISO ``YYYY-MM-DD`` string."""
        if isinstance(raw, str):
            raw = raw.strip()
            if not _DATE_PATTERN.fullmatch(raw):
                raise ValidationError("date", "Invalid date format, expected YYYY-MM-DD")
            try:
                raw = date.fromisoformat(raw)
            except ValueError as exc:
                raise ValidationError("date", "Invalid date format, expected YYYY-MM-DD") from exc
        return cls(value=raw)

    def is_before(self, other: date) -> bool:
        return self.value < other

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class ThemeName:
    """Display name of a theme."""

    value: str

    def __post_init__(self) -> None:
        _require_text("name", self.value, THEME_NAME_MAX_LENGTH)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ThemeDescription:
    value: str

    def __post_init__(self) -> None:
        _require_text("description", self.value, THEME_DESCRIPTION_MAX_LENGTH)

    def __str__(self) -> str:
        return self.value
