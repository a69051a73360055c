"""Domain models representing booking state.

These are pure domain objects with no API input rules.
Django ORM models are in roomescape/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import date, time
from typing import Self

from roomescape.domain.errors import ValidationError
from roomescape.domain.value_objects import (
    ClientName,
    ReservationDate,
    ReservationId,
    ReservationTimeId,
    ThemeDescription,
    ThemeId,
    THUMBNAIL_MAX_LENGTH,
    ThemeName,
)


@dataclass(frozen=True)
class Theme:
    """Domain representation of an escape-room theme."""

    id: ThemeId | None
    name: ThemeName
    description: ThemeDescription
    thumbnail: str

    @classmethod
    def create(cls, name: str, description: str, thumbnail: str) -> Self:
        """Factory for a new, not yet persisted theme."""
        if not isinstance(thumbnail, str):
            raise ValidationError("thumbnail", "thumbnail must be a string")
        if len(thumbnail) > THUMBNAIL_MAX_LENGTH:
            raise ValidationError(
                "thumbnail", f"thumbnail must be at most {THUMBNAIL_MAX_LENGTH} characters"
            )
        return cls(
            id=None,
            name=ThemeName(name),
            description=ThemeDescription(description),
            thumbnail=thumbnail,
        )

    def with_id(self, theme_id: ThemeId) -> Self:
        return replace(self, id=theme_id)


@dataclass(frozen=True)
class ReservationTime:
    """Domain representation of a bookable time of day."""

    id: ReservationTimeId | None
    start_at: time

    def __post_init__(self) -> None:
        if not isinstance(self.start_at, time):
            raise ValidationError("startAt", "startAt must be a time of day")

    @staticmethod
    def parse_start_at(raw: time | str) -> time:
        """Parse an ``HH:MM`` string; time values pass through."""
        if isinstance(raw, time):
            return raw
        if not isinstance(raw, str):
            raise ValidationError("startAt", "startAt must be a time of day")
        try:
            hour, minute = raw.strip().split(":")
            return time(int(hour), int(minute))
        except ValueError as exc:
            raise ValidationError("startAt", "Invalid time format, expected HH:MM") from exc

    @classmethod
    def create(cls, start_at: time | str) -> Self:
        return cls(id=None, start_at=cls.parse_start_at(start_at))

    def with_id(self, time_id: ReservationTimeId) -> Self:
        return replace(self, id=time_id)


@dataclass(frozen=True)
class Reservation:
    """Aggregate root for a single booking.

    Holds immutable copies of the referenced time and theme; their lifecycle
    belongs to their own services.
    """

    id: ReservationId | None
    client_name: ClientName
    date: ReservationDate
    time: ReservationTime
    theme: Theme

    def __post_init__(self) -> None:
        if self.time.id is None or self.theme.id is None:
            raise ValidationError("reservation", "Reservation must reference persisted time and theme")

    @classmethod
    def create(
        cls,
        client_name: str,
        reservation_date: date | str,
        reservation_time: ReservationTime,
        theme: Theme,
    ) -> Self:
        """Factory for a new booking against an existing time and theme."""
        return cls(
            id=None,
            client_name=ClientName(client_name),
            date=ReservationDate.parse(reservation_date),
            time=reservation_time,
            theme=theme,
        )

    @property
    def time_id(self) -> ReservationTimeId:
        return self.time.id

    @property
    def theme_id(self) -> ThemeId:
        return self.theme.id

    def with_id(self, reservation_id: ReservationId) -> Self:
        return replace(self, id=reservation_id)
