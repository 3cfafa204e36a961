from __future__ import annotations

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from weathersnap.core.providers.geolocation import IPGeolocator, StaticGeolocator
from weathersnap.core.services.factory import build_client, build_controller, build_geolocator


def test_build_client_reads_settings():
    with override_settings(OPENWEATHER_API_KEY="abc", OPENWEATHER_BASE_URL="https://ow.test", OPENWEATHER_TIMEOUT=3.0):
        client = build_client()

    assert client.api_key == "abc"
    assert client.base_url == "https://ow.test"
    assert client.request_config.timeout == 3.0


def test_build_client_requires_api_key():
    with override_settings(OPENWEATHER_API_KEY=""):
        with pytest.raises(ImproperlyConfigured):
            build_client()


def test_build_geolocator_none():
    with override_settings(WEATHERSNAP_GEOLOCATION="none"):
        assert build_geolocator() is None


def test_build_geolocator_static():
    with override_settings(WEATHERSNAP_GEOLOCATION="static", WEATHERSNAP_LATITUDE=1.5, WEATHERSNAP_LONGITUDE=2.5):
        assert isinstance(build_geolocator(), StaticGeolocator)


def test_build_geolocator_static_requires_position():
    with override_settings(WEATHERSNAP_GEOLOCATION="static", WEATHERSNAP_LATITUDE=None, WEATHERSNAP_LONGITUDE=None):
        with pytest.raises(ImproperlyConfigured):
            build_geolocator()


def test_build_geolocator_ip():
    with override_settings(WEATHERSNAP_GEOLOCATION="ip", WEATHERSNAP_IP_GEOLOCATION_URL="https://ip.test/json"):
        geolocator = build_geolocator()

    assert isinstance(geolocator, IPGeolocator)
    assert geolocator.url == "https://ip.test/json"


def test_build_geolocator_rejects_unknown_mode():
    with override_settings(WEATHERSNAP_GEOLOCATION="gps"):
        with pytest.raises(ImproperlyConfigured):
            build_geolocator()


def test_build_controller_prefers_given_geolocator():
    geolocator = StaticGeolocator(0.0, 0.0)

    controller = build_controller(geolocator=geolocator)

    assert controller.geolocator is geolocator
