"""Reservation service - booking rules live here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Callable
from datetime import date

import structlog

from roomescape.domain import (
    Reservation,
    ReservationDate,
    ReservationId,
    ReservationTimeId,
    ThemeId,
)
from roomescape.domain.errors import (
    ConflictError,
    ConflictKind,
    NotFoundError,
    ResourceKind,
    ValidationError,
)
from roomescape.stores.interfaces import (
    ReservationRepository,
    ReservationTimeRepository,
    ThemeRepository,
)

logger = structlog.get_logger(__name__)


class ReservationService:
    """Service for creating, listing and cancelling reservations."""

    def __init__(
        self,
        reservations: ReservationRepository,
        times: ReservationTimeRepository,
        themes: ThemeRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._reservations = reservations
        self._times = times
        self._themes = themes
        self._clock = clock

    def list_reservations(self) -> list[Reservation]:
        """Return all reservations with their time and theme."""
        return self._reservations.find_all()

    def list_reservations_filtered(
        self, reservation_date: date | str, theme_id: int | str
    ) -> list[Reservation]:
        """Return reservations booked for a theme on a date.

        Raises:
            ValidationError: If the date or theme id is malformed.
        """
        return self._reservations.find_all_by_date_and_theme(
            ReservationDate.parse(reservation_date), ThemeId.parse(theme_id)
        )

    def create_reservation(
        self,
        reservation_date: date | str,
        client_name: str,
        time_id: int | str,
        theme_id: int | str,
    ) -> Reservation:
        """Book a theme for a date and time.

        Raises:
            ValidationError: If an id, the name or the date is malformed, or
                the date is already past.
            NotFoundError: If the time or theme does not exist.
            ConflictError: If the slot is already booked.
        """
        parsed_time_id = ReservationTimeId.parse(time_id)
        parsed_theme_id = ThemeId.parse(theme_id)

        reservation_time = self._times.find_by_id(parsed_time_id)
        if reservation_time is None:
            raise NotFoundError(ResourceKind.TIME, parsed_time_id.value)
        theme = self._themes.find_by_id(parsed_theme_id)
        if theme is None:
            raise NotFoundError(ResourceKind.THEME, parsed_theme_id.value)

        reservation = Reservation.create(client_name, reservation_date, reservation_time, theme)
        if reservation.date.is_before(self._clock()):
            raise ValidationError("date", "Cannot reserve a date in the past")

        if self._reservations.exists_by_date_and_time_and_theme(
            reservation.date, parsed_time_id, parsed_theme_id
        ):
            logger.info(
                "reservation_rejected",
                reason=ConflictKind.DUPLICATE_BOOKING.value,
                date=str(reservation.date),
                time_id=parsed_time_id.value,
                theme_id=parsed_theme_id.value,
            )
            raise ConflictError(ConflictKind.DUPLICATE_BOOKING)

        # the store's unique constraint settles concurrent inserts
        saved = self._reservations.save(reservation)
        logger.info(
            "reservation_created",
            reservation_id=saved.id.value,
            date=str(saved.date),
            time_id=parsed_time_id.value,
            theme_id=parsed_theme_id.value,
        )
        return saved

    def delete_reservation(self, reservation_id: int | str) -> None:
        """Cancel a reservation.

        Raises:
            ValidationError: If the id is malformed.
            NotFoundError: If the reservation does not exist.
        """
        parsed_id = ReservationId.parse(reservation_id)
        if self._reservations.find_by_id(parsed_id) is None:
            raise NotFoundError(ResourceKind.RESERVATION, parsed_id.value)
        self._reservations.delete_by_id(parsed_id)
        logger.info("reservation_deleted", reservation_id=parsed_id.value)
