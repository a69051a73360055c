"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Implementations translate
their own failures into StorageError, and uniqueness or referential
constraint violations into ConflictError.
"""

from abc import ABC, abstractmethod
from datetime import date

from roomescape.domain import (
    Reservation,
    ReservationDate,
    ReservationId,
    ReservationTime,
    ReservationTimeId,
    Theme,
    ThemeId,
)


class ReservationRepository(ABC):
    """Interface for reservation persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """Return all reservations, hydrated, ordered by id ascending."""
        ...

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """Return a reservation by ID, or None if not found."""
        ...

    @abstractmethod
    def find_all_by_date_and_theme(
        self, reservation_date: ReservationDate, theme_id: ThemeId
    ) -> list[Reservation]:
        """Return reservations on a date for a theme, ordered by start time."""
        ...

    @abstractmethod
    def exists_by_date_and_time_and_theme(
        self,
        reservation_date: ReservationDate,
        time_id: ReservationTimeId,
        theme_id: ThemeId,
    ) -> bool:
        """Check if the (date, time, theme) slot is already booked."""
        ...

    @abstractmethod
    def exists_by_time_id(self, time_id: ReservationTimeId) -> bool:
        """Check if any reservation references the time."""
        ...

    @abstractmethod
    def exists_by_theme_id(self, theme_id: ThemeId) -> bool:
        """Check if any reservation references the theme."""
        ...

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Insert a reservation and return it carrying its assigned ID.

        Raises:
            ConflictError: If the (date, time, theme) slot is already taken.
            NotFoundError: If the time or theme was deleted before the insert.
        """
        ...

    @abstractmethod
    def delete_by_id(self, reservation_id: ReservationId) -> None:
        ...


class ThemeRepository(ABC):
    """Interface for theme persistence operations."""

    @abstractmethod
    def find_by_id(self, theme_id: ThemeId) -> Theme | None:
        """Return a theme by ID, or None if not found."""
        ...

    @abstractmethod
    def find_all(self) -> list[Theme]:
        """Return all themes ordered by id ascending."""
        ...

    @abstractmethod
    def exists_by_id(self, theme_id: ThemeId) -> bool:
        ...

    @abstractmethod
    def save(self, theme: Theme) -> Theme:
        """Insert a theme and return it carrying its assigned ID."""
        ...

    @abstractmethod
    def delete_by_id(self, theme_id: ThemeId) -> None:
        """Delete a theme.

        Raises:
            ConflictError: If a reservation still references the theme.
        """
        ...

    @abstractmethod
    def find_popular_themes(self, start_date: date, end_date: date, limit: int) -> list[Theme]:
        """Return themes ranked by reservations within [start_date, end_date].

        Ordered by reservation count descending, then theme id ascending.
        Themes without reservations in the window are omitted.
        """
        ...


class ReservationTimeRepository(ABC):
    """Interface for reservation time persistence operations."""

    @abstractmethod
    def find_by_id(self, time_id: ReservationTimeId) -> ReservationTime | None:
        """Return a time by ID, or None if not found."""
        ...

    @abstractmethod
    def find_all(self) -> list[ReservationTime]:
        """Return all times ordered by start_at ascending."""
        ...

    @abstractmethod
    def exists_by_id(self, time_id: ReservationTimeId) -> bool:
        ...

    @abstractmethod
    def save(self, reservation_time: ReservationTime) -> ReservationTime:
        """Insert a time and return it carrying its assigned ID."""
        ...

    @abstractmethod
    def delete_by_id(self, time_id: ReservationTimeId) -> None:
        """Delete a time.

        Raises:
            ConflictError: If a reservation still references the time.
        """
        ...
