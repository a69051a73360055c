from roomescape.services.reservation_service import ReservationService
from roomescape.services.reservation_time_service import ReservationTimeService
from roomescape.services.theme_service import ThemeService

__all__ = ["ReservationService", "ReservationTimeService", "ThemeService"]
