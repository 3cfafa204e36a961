"""Django settings for the weather lookup tool."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured

from weathersnap.core.providers.geolocation import DEFAULT_IP_GEOLOCATION_URL
from weathersnap.core.providers.openweather import DEFAULT_BASE_URL

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def env_float(name: str) -> float | None:
    value = os.environ.get(name)
    if value in (None, ""):
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {name} must be a number") from exc


SECRET_KEY = env("DJANGO_SECRET_KEY", "weathersnap-local")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

INSTALLED_APPS = [
    "weathersnap",
]

DATABASES: dict = {}

USE_TZ = True
TIME_ZONE = "UTC"

OPENWEATHER_API_KEY = env("OPENWEATHER_API_KEY", "")
OPENWEATHER_BASE_URL = env("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL)
OPENWEATHER_TIMEOUT = env_float("OPENWEATHER_TIMEOUT")

WEATHERSNAP_GEOLOCATION = env("WEATHERSNAP_GEOLOCATION", "ip").lower()
WEATHERSNAP_LATITUDE = env_float("WEATHERSNAP_LATITUDE")
WEATHERSNAP_LONGITUDE = env_float("WEATHERSNAP_LONGITUDE")
WEATHERSNAP_IP_GEOLOCATION_URL = env("WEATHERSNAP_IP_GEOLOCATION_URL", DEFAULT_IP_GEOLOCATION_URL)

LOG_LEVEL = env("WEATHERSNAP_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "weathersnap": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
