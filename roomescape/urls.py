from django.urls import path

from roomescape.handlers import (
    PopularThemeListView,
    ReservationDetailView,
    ReservationListView,
    ReservationTimeDetailView,
    ReservationTimeListView,
    ThemeDetailView,
    ThemeListView,
)

urlpatterns = [
    path("reservations", ReservationListView.as_view(), name="reservation-list"),
    path(
        "reservations/<str:reservation_id>",
        ReservationDetailView.as_view(),
        name="reservation-detail",
    ),
    path("themes", ThemeListView.as_view(), name="theme-list"),
    path("themes/popular", PopularThemeListView.as_view(), name="theme-popular"),
    path("themes/<str:theme_id>", ThemeDetailView.as_view(), name="theme-detail"),
    path("times", ReservationTimeListView.as_view(), name="time-list"),
    path("times/<str:time_id>", ReservationTimeDetailView.as_view(), name="time-detail"),
]
