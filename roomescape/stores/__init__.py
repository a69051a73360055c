from roomescape.stores.interfaces import (
    ReservationRepository,
    ReservationTimeRepository,
    ThemeRepository,
)

__all__ = ["ReservationRepository", "ReservationTimeRepository", "ThemeRepository"]
