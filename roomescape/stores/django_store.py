"""Django ORM implementation of the roomescape stores.

Each store is bound to an explicit database alias handed in by the
composition root.
"""

import functools
from collections.abc import Callable
from datetime import date
from typing import ParamSpec, TypeVar

import structlog
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count

from roomescape import models
from roomescape.domain import (
    ClientName,
    Reservation,
    ReservationDate,
    ReservationId,
    ReservationTime,
    ReservationTimeId,
    Theme,
    ThemeDescription,
    ThemeId,
    ThemeName,
)
from roomescape.domain.errors import (
    ConflictError,
    ConflictKind,
    DomainError,
    NotFoundError,
    ResourceKind,
    StorageError,
)
from roomescape.stores.interfaces import (
    ReservationRepository,
    ReservationTimeRepository,
    ThemeRepository,
)

logger = structlog.get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def translate_storage_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Surface any uncaught database failure as a StorageError."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except DatabaseError as exc:
            logger.error("storage_failure", operation=func.__qualname__, error=str(exc))
            raise StorageError(func.__qualname__) from exc

    return wrapper


def _to_theme(row: models.Theme) -> Theme:
    return Theme(
        id=ThemeId(row.id),
        name=ThemeName(row.name),
        description=ThemeDescription(row.description),
        thumbnail=row.thumbnail,
    )


def _to_time(row: models.ReservationTime) -> ReservationTime:
    return ReservationTime(id=ReservationTimeId(row.id), start_at=row.start_at)


def _to_reservation(row: models.Reservation) -> Reservation:
    return Reservation(
        id=ReservationId(row.id),
        client_name=ClientName(row.name),
        date=ReservationDate(row.date),
        time=_to_time(row.time),
        theme=_to_theme(row.theme),
    )


class DjangoReservationRepository(ReservationRepository):
    """Relational reservation store using Django ORM."""

    def __init__(self, using: str = "default") -> None:
        self._using = using

    def _hydrated(self):
        return models.Reservation.objects.using(self._using).select_related("time", "theme")

    @translate_storage_errors
    def find_all(self) -> list[Reservation]:
        return [_to_reservation(row) for row in self._hydrated().order_by("id")]

    @translate_storage_errors
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        row = self._hydrated().filter(pk=reservation_id.value).first()
        return _to_reservation(row) if row is not None else None

    @translate_storage_errors
    def find_all_by_date_and_theme(
        self, reservation_date: ReservationDate, theme_id: ThemeId
    ) -> list[Reservation]:
        rows = self._hydrated().filter(
            date=reservation_date.value, theme_id=theme_id.value
        ).order_by("time__start_at", "id")
        return [_to_reservation(row) for row in rows]

    @translate_storage_errors
    def exists_by_date_and_time_and_theme(
        self,
        reservation_date: ReservationDate,
        time_id: ReservationTimeId,
        theme_id: ThemeId,
    ) -> bool:
        return (
            models.Reservation.objects.using(self._using)
            .filter(date=reservation_date.value, time_id=time_id.value, theme_id=theme_id.value)
            .exists()
        )

    @translate_storage_errors
    def exists_by_time_id(self, time_id: ReservationTimeId) -> bool:
        return models.Reservation.objects.using(self._using).filter(time_id=time_id.value).exists()

    @translate_storage_errors
    def exists_by_theme_id(self, theme_id: ThemeId) -> bool:
        return models.Reservation.objects.using(self._using).filter(theme_id=theme_id.value).exists()

    @translate_storage_errors
    def save(self, reservation: Reservation) -> Reservation:
        try:
            with transaction.atomic(using=self._using):
                row = models.Reservation.objects.using(self._using).create(
                    name=reservation.client_name.value,
                    date=reservation.date.value,
                    time_id=reservation.time_id.value,
                    theme_id=reservation.theme_id.value,
                )
        except IntegrityError as exc:
            raise self._classify_insert_failure(reservation) from exc
        return reservation.with_id(ReservationId(row.id))

    def _classify_insert_failure(self, reservation: Reservation) -> DomainError:
        """Tell a taken slot apart from a time or theme deleted meanwhile."""
        if self.exists_by_date_and_time_and_theme(
            reservation.date, reservation.time_id, reservation.theme_id
        ):
            return ConflictError(ConflictKind.DUPLICATE_BOOKING)
        if not models.ReservationTime.objects.using(self._using).filter(
            pk=reservation.time_id.value
        ).exists():
            return NotFoundError(ResourceKind.TIME, reservation.time_id.value)
        if not models.Theme.objects.using(self._using).filter(
            pk=reservation.theme_id.value
        ).exists():
            return NotFoundError(ResourceKind.THEME, reservation.theme_id.value)
        logger.error("storage_failure", operation="DjangoReservationRepository.save")
        return StorageError("DjangoReservationRepository.save")

    @translate_storage_errors
    def delete_by_id(self, reservation_id: ReservationId) -> None:
        models.Reservation.objects.using(self._using).filter(pk=reservation_id.value).delete()


class DjangoThemeRepository(ThemeRepository):
    """Relational theme store using Django ORM."""

    def __init__(self, using: str = "default") -> None:
        self._using = using

    @translate_storage_errors
    def find_by_id(self, theme_id: ThemeId) -> Theme | None:
        row = models.Theme.objects.using(self._using).filter(pk=theme_id.value).first()
        return _to_theme(row) if row is not None else None

    @translate_storage_errors
    def find_all(self) -> list[Theme]:
        return [_to_theme(row) for row in models.Theme.objects.using(self._using).order_by("id")]

    @translate_storage_errors
    def exists_by_id(self, theme_id: ThemeId) -> bool:
        return models.Theme.objects.using(self._using).filter(pk=theme_id.value).exists()

    @translate_storage_errors
    def save(self, theme: Theme) -> Theme:
        row = models.Theme.objects.using(self._using).create(
            name=theme.name.value,
            description=theme.description.value,
            thumbnail=theme.thumbnail,
        )
        return theme.with_id(ThemeId(row.id))

    @translate_storage_errors
    def delete_by_id(self, theme_id: ThemeId) -> None:
        # ProtectedError is an IntegrityError
        try:
            with transaction.atomic(using=self._using):
                models.Theme.objects.using(self._using).filter(pk=theme_id.value).delete()
        except IntegrityError as exc:
            raise ConflictError(ConflictKind.THEME_IN_USE) from exc

    @translate_storage_errors
    def find_popular_themes(self, start_date: date, end_date: date, limit: int) -> list[Theme]:
        rows = (
            models.Theme.objects.using(self._using)
            .filter(reservations__date__range=(start_date, end_date))
            .annotate(reservation_count=Count("reservations"))
            .order_by("-reservation_count", "id")[:limit]
        )
        return [_to_theme(row) for row in rows]


class DjangoReservationTimeRepository(ReservationTimeRepository):
    """Relational reservation time store using Django ORM."""

    def __init__(self, using: str = "default") -> None:
        self._using = using

    @translate_storage_errors
    def find_by_id(self, time_id: ReservationTimeId) -> ReservationTime | None:
        row = models.ReservationTime.objects.using(self._using).filter(pk=time_id.value).first()
        return _to_time(row) if row is not None else None

    @translate_storage_errors
    def find_all(self) -> list[ReservationTime]:
        rows = models.ReservationTime.objects.using(self._using).order_by("start_at", "id")
        return [_to_time(row) for row in rows]

    @translate_storage_errors
    def exists_by_id(self, time_id: ReservationTimeId) -> bool:
        return models.ReservationTime.objects.using(self._using).filter(pk=time_id.value).exists()

    @translate_storage_errors
    def save(self, reservation_time: ReservationTime) -> ReservationTime:
        row = models.ReservationTime.objects.using(self._using).create(
            start_at=reservation_time.start_at
        )
        return reservation_time.with_id(ReservationTimeId(row.id))

    @translate_storage_errors
    def delete_by_id(self, time_id: ReservationTimeId) -> None:
        try:
            with transaction.atomic(using=self._using):
                models.ReservationTime.objects.using(self._using).filter(
                    pk=time_id.value
                ).delete()
        except IntegrityError as exc:
            raise ConflictError(ConflictKind.TIME_IN_USE) from exc
