"""Reservation time service."""

from datetime import time

import structlog

from roomescape.domain import ReservationTime, ReservationTimeId
from roomescape.domain.errors import ConflictError, ConflictKind, NotFoundError, ResourceKind
from roomescape.stores.interfaces import ReservationRepository, ReservationTimeRepository

logger = structlog.get_logger(__name__)


class ReservationTimeService:
    """Service for bookable times of day."""

    def __init__(
        self, times: ReservationTimeRepository, reservations: ReservationRepository
    ) -> None:
        self._times = times
        self._reservations = reservations

    def list_times(self) -> list[ReservationTime]:
        return self._times.find_all()

    def create_time(self, start_at: time | str) -> ReservationTime:
        """Register a bookable time.

        Raises:
            ValidationError: If start_at is not a valid ``HH:MM`` time.
        """
        saved = self._times.save(ReservationTime.create(start_at))
        logger.info("time_created", time_id=saved.id.value, start_at=saved.start_at.isoformat())
        return saved

    def delete_time(self, time_id: int | str) -> None:
        """Remove a time nobody has booked.

        Raises:
            ValidationError: If the id is malformed.
            NotFoundError: If the time does not exist.
            ConflictError: If any reservation references the time.
        """
        parsed_id = ReservationTimeId.parse(time_id)
        if not self._times.exists_by_id(parsed_id):
            raise NotFoundError(ResourceKind.TIME, parsed_id.value)
        if self._reservations.exists_by_time_id(parsed_id):
            logger.info("time_delete_rejected", time_id=parsed_id.value)
            raise ConflictError(ConflictKind.TIME_IN_USE)
        self._times.delete_by_id(parsed_id)
        logger.info("time_deleted", time_id=parsed_id.value)
