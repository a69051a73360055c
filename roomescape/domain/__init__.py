from roomescape.domain.models import Reservation, ReservationTime, Theme
from roomescape.domain.value_objects import (
    ClientName,
    ReservationDate,
    ReservationId,
    ReservationTimeId,
    ThemeDescription,
    ThemeId,
    ThemeName,
)

__all__ = [
    "Reservation",
    "ReservationTime",
    "Theme",
    "ReservationId",
    "ReservationTimeId",
    "ThemeId",
    "ClientName",
    "ReservationDate",
    "ThemeName",
    "ThemeDescription",
]
