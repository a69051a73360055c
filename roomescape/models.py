"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models

from roomescape.domain.value_objects import (
    CLIENT_NAME_MAX_LENGTH,
    THEME_DESCRIPTION_MAX_LENGTH,
    THEME_NAME_MAX_LENGTH,
    THUMBNAIL_MAX_LENGTH,
)


class Theme(models.Model):
    """Persistence model for themes."""

    name = models.CharField(max_length=THEME_NAME_MAX_LENGTH)
    description = models.CharField(max_length=THEME_DESCRIPTION_MAX_LENGTH)
    thumbnail = models.CharField(max_length=THUMBNAIL_MAX_LENGTH)

    class Meta:
        db_table = "theme"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class ReservationTime(models.Model):
    """Persistence model for bookable times of day."""

    start_at = models.TimeField()

    class Meta:
        db_table = "reservation_time"
        ordering = ["start_at"]

    def __str__(self) -> str:
        return self.start_at.strftime("%H:%M")


class Reservation(models.Model):
    """Persistence model for reservations.

    Times and themes are protected from deletion while referenced, and a
    (date, time, theme) slot can be booked once.
    """

    name = models.CharField(max_length=CLIENT_NAME_MAX_LENGTH)
    date = models.DateField()
    time = models.ForeignKey(
        ReservationTime, on_delete=models.PROTECT, related_name="reservations"
    )
    theme = models.ForeignKey(Theme, on_delete=models.PROTECT, related_name="reservations")

    class Meta:
        db_table = "reservation"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["date", "time", "theme"],
                name="unique_reservation_date_time_theme",
            ),
        ]
        indexes = [
            models.Index(fields=["theme", "date"], name="idx_reservation_theme_date"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.date} {self.time_id}/{self.theme_id}"
