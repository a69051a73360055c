"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from rest_framework.test import APIClient

from roomescape.services import ReservationService, ReservationTimeService, ThemeService
from tests.fakes import (
    InMemoryDatabase,
    InMemoryReservationRepository,
    InMemoryReservationTimeRepository,
    InMemoryThemeRepository,
)

TODAY = date(2024, 5, 20)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def reservation_repository(memory_db: InMemoryDatabase) -> InMemoryReservationRepository:
    return InMemoryReservationRepository(memory_db)


@pytest.fixture
def theme_repository(memory_db: InMemoryDatabase) -> InMemoryThemeRepository:
    return InMemoryThemeRepository(memory_db)


@pytest.fixture
def time_repository(memory_db: InMemoryDatabase) -> InMemoryReservationTimeRepository:
    return InMemoryReservationTimeRepository(memory_db)


@pytest.fixture
def reservation_service(
    reservation_repository, time_repository, theme_repository
) -> ReservationService:
    return ReservationService(
        reservations=reservation_repository,
        times=time_repository,
        themes=theme_repository,
        clock=lambda: TODAY,
    )


@pytest.fixture
def theme_service(theme_repository, reservation_repository) -> ThemeService:
    return ThemeService(
        themes=theme_repository,
        reservations=reservation_repository,
        clock=lambda: TODAY,
    )


@pytest.fixture
def time_service(time_repository, reservation_repository) -> ReservationTimeService:
    return ReservationTimeService(times=time_repository, reservations=reservation_repository)
