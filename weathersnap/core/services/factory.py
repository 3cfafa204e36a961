"""Build the controller stack from Django settings."""
from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from ..abstractions import Geolocator
from ..notices import NoticeSink
from ..providers.base import RequestConfig
from ..providers.geolocation import IPGeolocator, StaticGeolocator
from ..providers.openweather import OpenWeatherClient
from .controller import WeatherQueryController


def build_client() -> OpenWeatherClient:
    api_key = settings.OPENWEATHER_API_KEY
    if not api_key:
        raise ImproperlyConfigured("OPENWEATHER_API_KEY must be set to query the weather API")
    return OpenWeatherClient(
        api_key=api_key,
        base_url=settings.OPENWEATHER_BASE_URL,
        request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
    )


def build_geolocator() -> Optional[Geolocator]:
    mode = settings.WEATHERSNAP_GEOLOCATION
    if mode == "none":
        return None
    if mode == "static":
        latitude = settings.WEATHERSNAP_LATITUDE
        longitude = settings.WEATHERSNAP_LONGITUDE
        if latitude is None or longitude is None:
            raise ImproperlyConfigured(
                "WEATHERSNAP_LATITUDE and WEATHERSNAP_LONGITUDE are required for static geolocation"
            )
        return StaticGeolocator(latitude, longitude)
    if mode == "ip":
        return IPGeolocator(
            url=settings.WEATHERSNAP_IP_GEOLOCATION_URL,
            request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
        )
    raise ImproperlyConfigured(f"Unknown WEATHERSNAP_GEOLOCATION mode: {mode}")


def build_controller(
    *,
    geolocator: Optional[Geolocator] = None,
    notify: Optional[NoticeSink] = None,
) -> WeatherQueryController:
    return WeatherQueryController(
        build_client(),
        geolocator=geolocator if geolocator is not None else build_geolocator(),
        notify=notify,
    )


__all__ = ["build_client", "build_geolocator", "build_controller"]
