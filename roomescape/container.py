"""Composition root: wires Django stores, settings and the clock into services."""

from django.conf import settings
from django.utils import timezone

from roomescape.services import ReservationService, ReservationTimeService, ThemeService
from roomescape.stores.django_store import (
    DjangoReservationRepository,
    DjangoReservationTimeRepository,
    DjangoThemeRepository,
)


def _db_alias() -> str:
    return getattr(settings, "ROOMESCAPE_DB_ALIAS", "default")


def get_reservation_service() -> ReservationService:
    alias = _db_alias()
    return ReservationService(
        reservations=DjangoReservationRepository(using=alias),
        times=DjangoReservationTimeRepository(using=alias),
        themes=DjangoThemeRepository(using=alias),
        clock=timezone.localdate,
    )


def get_theme_service() -> ThemeService:
    alias = _db_alias()
    return ThemeService(
        themes=DjangoThemeRepository(using=alias),
        reservations=DjangoReservationRepository(using=alias),
        clock=timezone.localdate,
        popular_days=settings.ROOMESCAPE_POPULAR_THEME_DAYS,
        popular_limit=settings.ROOMESCAPE_POPULAR_THEME_LIMIT,
    )


def get_reservation_time_service() -> ReservationTimeService:
    alias = _db_alias()
    return ReservationTimeService(
        times=DjangoReservationTimeRepository(using=alias),
        reservations=DjangoReservationRepository(using=alias),
    )
