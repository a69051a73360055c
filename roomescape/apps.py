from django.apps import AppConfig
from django.conf import settings


class RoomescapeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "roomescape"

    def ready(self) -> None:
        from config.logging import configure_logging

        configure_logging(getattr(settings, "ENVIRONMENT", "development"))
