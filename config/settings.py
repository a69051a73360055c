"""Django settings for the roomescape project.

Values come from ``ROOMESCAPE_*`` environment variables with development
defaults.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in {"1", "true", "yes"}


SECRET_KEY = os.environ.get("ROOMESCAPE_SECRET_KEY", "django-insecure-roomescape-dev-key")
DEBUG = _env_bool("ROOMESCAPE_DEBUG")
ENVIRONMENT = os.environ.get("ROOMESCAPE_ENVIRONMENT", "development")
ALLOWED_HOSTS = [
    host for host in os.environ.get("ROOMESCAPE_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if host
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "roomescape.apps.RoomescapeConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("ROOMESCAPE_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("ROOMESCAPE_TIME_ZONE", "UTC")
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# Booking rules
ROOMESCAPE_DB_ALIAS = "default"
ROOMESCAPE_POPULAR_THEME_DAYS = int(os.environ.get("ROOMESCAPE_POPULAR_THEME_DAYS", "7"))
ROOMESCAPE_POPULAR_THEME_LIMIT = int(os.environ.get("ROOMESCAPE_POPULAR_THEME_LIMIT", "10"))
