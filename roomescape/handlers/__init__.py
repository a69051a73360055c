from roomescape.handlers.views import (
    PopularThemeListView,
    ReservationDetailView,
    ReservationListView,
    ReservationTimeDetailView,
    ReservationTimeListView,
    ThemeDetailView,
    ThemeListView,
)

__all__ = [
    "PopularThemeListView",
    "ReservationDetailView",
    "ReservationListView",
    "ReservationTimeDetailView",
    "ReservationTimeListView",
    "ThemeDetailView",
    "ThemeListView",
]
