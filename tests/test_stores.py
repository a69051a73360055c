"""Integration tests for the Django ORM stores.

These check that the database schema backs the booking invariants even when
the service-level checks are bypassed.
Run with: pytest tests/test_stores.py -v
"""

from datetime import date, time
from unittest import mock

import pytest
from django.db import OperationalError

from roomescape import models
from roomescape.domain import (
    Reservation,
    ReservationDate,
    ReservationId,
    ReservationTime,
    Theme,
    ThemeId,
)
from roomescape.domain.errors import (
    ConflictError,
    ConflictKind,
    NotFoundError,
    ResourceKind,
    StorageError,
)
from roomescape.stores.django_store import (
    DjangoReservationRepository,
    DjangoReservationTimeRepository,
    DjangoThemeRepository,
)


@pytest.fixture
def themes() -> DjangoThemeRepository:
    return DjangoThemeRepository()


@pytest.fixture
def times() -> DjangoReservationTimeRepository:
    return DjangoReservationTimeRepository()


@pytest.fixture
def reservations() -> DjangoReservationRepository:
    return DjangoReservationRepository()


@pytest.fixture
def theme(themes) -> Theme:
    return themes.save(Theme.create("Secret", "desc", "thumb"))


@pytest.fixture
def slot(times) -> ReservationTime:
    return times.save(ReservationTime.create("10:00"))


@pytest.fixture
def booked(reservations, theme, slot) -> Reservation:
    return reservations.save(Reservation.create("Kelly", date(2024, 6, 1), slot, theme))


@pytest.mark.django_db
class TestDjangoReservationRepository:
    """Tests for DjangoReservationRepository."""

    def test_save_assigns_id(self, booked):
        assert booked.id is not None

    def test_find_all_hydrates_time_and_theme(self, reservations, booked, theme, slot):
        """Reservations come back with their full theme and time."""
        found = reservations.find_all()
        assert found == [booked]
        assert found[0].theme == theme
        assert found[0].time.start_at == time(10, 0)

    def test_find_by_id(self, reservations, booked):
        assert reservations.find_by_id(booked.id) == booked
        assert reservations.find_by_id(ReservationId(999)) is None

    def test_unique_constraint_rejects_duplicate_slot(self, reservations, booked, theme, slot):
        """The database refuses a second booking of the same triple."""
        with pytest.raises(ConflictError) as excinfo:
            reservations.save(Reservation.create("Teba", date(2024, 6, 1), slot, theme))
        assert excinfo.value.kind is ConflictKind.DUPLICATE_BOOKING
        assert len(reservations.find_all()) == 1

    def test_exists_compares_all_three_fields(self, reservations, themes, booked, theme, slot):
        """Another theme in the same date/time slot is not a duplicate."""
        other = themes.save(Theme.create("Horror", "scary", "thumb"))
        day = ReservationDate(date(2024, 6, 1))
        assert reservations.exists_by_date_and_time_and_theme(day, slot.id, theme.id)
        assert not reservations.exists_by_date_and_time_and_theme(day, slot.id, other.id)

    def test_find_all_by_date_and_theme(self, reservations, times, booked, theme):
        early = times.save(ReservationTime.create("09:00"))
        earlier_booking = reservations.save(
            Reservation.create("Teba", date(2024, 6, 1), early, theme)
        )
        reservations.save(Reservation.create("Teba", date(2024, 6, 2), early, theme))

        found = reservations.find_all_by_date_and_theme(ReservationDate(date(2024, 6, 1)), theme.id)
        assert found == [earlier_booking, booked]

    def test_exists_by_references(self, reservations, booked, theme, slot):
        assert reservations.exists_by_theme_id(theme.id)
        assert reservations.exists_by_time_id(slot.id)
        reservations.delete_by_id(booked.id)
        assert not reservations.exists_by_theme_id(theme.id)
        assert not reservations.exists_by_time_id(slot.id)

    def test_database_failure_becomes_storage_error(self, reservations):
        """Driver errors surface as StorageError."""
        with mock.patch.object(
            models.Reservation.objects,
            "using",
            side_effect=OperationalError("database is locked"),
        ):
            with pytest.raises(StorageError) as excinfo:
                reservations.find_all()
        assert isinstance(excinfo.value.__cause__, OperationalError)


# SQLite checks foreign keys at commit.
@pytest.mark.django_db(transaction=True)
class TestReservationInsertRaces:
    """Tests for inserts that lose a race against a delete."""

    def test_time_deleted_before_insert(self, reservations, times, theme, slot):
        stale = Reservation.create("Kelly", date(2024, 6, 1), slot, theme)
        times.delete_by_id(slot.id)

        with pytest.raises(NotFoundError) as excinfo:
            reservations.save(stale)

        assert excinfo.value.kind is ResourceKind.TIME
        assert reservations.find_all() == []

    def test_theme_deleted_before_insert(self, reservations, themes, theme, slot):
        stale = Reservation.create("Kelly", date(2024, 6, 1), slot, theme)
        themes.delete_by_id(theme.id)

        with pytest.raises(NotFoundError) as excinfo:
            reservations.save(stale)

        assert excinfo.value.kind is ResourceKind.THEME

    def test_taken_slot_is_still_a_duplicate(self, reservations, booked, theme, slot):
        with pytest.raises(ConflictError) as excinfo:
            reservations.save(Reservation.create("Lee", date(2024, 6, 1), slot, theme))

        assert excinfo.value.kind is ConflictKind.DUPLICATE_BOOKING


@pytest.mark.django_db
class TestDjangoThemeRepository:
    """Tests for DjangoThemeRepository."""

    def test_find_and_exists(self, themes, theme):
        assert themes.find_by_id(theme.id) == theme
        assert themes.exists_by_id(theme.id)
        assert themes.find_by_id(ThemeId(999)) is None

    def test_delete_unreferenced_theme(self, themes, theme):
        themes.delete_by_id(theme.id)
        assert themes.find_all() == []

    def test_protected_delete_raises_conflict(self, themes, booked, theme):
        """A referenced theme is protected even without the service check."""
        with pytest.raises(ConflictError) as excinfo:
            themes.delete_by_id(theme.id)
        assert excinfo.value.kind is ConflictKind.THEME_IN_USE
        assert themes.exists_by_id(theme.id)

    def test_popular_themes_ranked_by_count_then_id(self, themes, times, reservations):
        """Counts only reservations inside the window; ties go to the lower id."""
        first = themes.save(Theme.create("First", "d", "t"))
        second = themes.save(Theme.create("Second", "d", "t"))
        third = themes.save(Theme.create("Third", "d", "t"))
        slots = [times.save(ReservationTime.create(f"{hour}:00")) for hour in (10, 11, 12)]

        for slot in slots:
            reservations.save(Reservation.create("Kelly", date(2024, 5, 15), slot, third))
        reservations.save(Reservation.create("Kelly", date(2024, 5, 13), slots[0], first))
        reservations.save(Reservation.create("Kelly", date(2024, 5, 19), slots[0], second))
        # outside the window
        reservations.save(Reservation.create("Kelly", date(2024, 5, 20), slots[1], first))
        reservations.save(Reservation.create("Kelly", date(2024, 5, 12), slots[1], second))

        popular = themes.find_popular_themes(date(2024, 5, 13), date(2024, 5, 19), 10)
        assert popular == [third, first, second]
        assert themes.find_popular_themes(date(2024, 5, 13), date(2024, 5, 19), 2) == [third, first]


@pytest.mark.django_db
class TestDjangoReservationTimeRepository:
    """Tests for DjangoReservationTimeRepository."""

    def test_find_all_ordered_by_start(self, times):
        late = times.save(ReservationTime.create("18:00"))
        early = times.save(ReservationTime.create("09:00"))
        assert times.find_all() == [early, late]

    def test_protected_delete_raises_conflict(self, times, booked, slot):
        with pytest.raises(ConflictError) as excinfo:
            times.delete_by_id(slot.id)
        assert excinfo.value.kind is ConflictKind.TIME_IN_USE

    def test_delete_after_reservation_removed(self, times, reservations, booked, slot):
        reservations.delete_by_id(booked.id)
        times.delete_by_id(slot.id)
        assert not times.exists_by_id(slot.id)
