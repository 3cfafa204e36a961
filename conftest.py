from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weathersnap.settings")
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")
os.environ.setdefault("OPENWEATHER_BASE_URL", "https://openweather.test/weather")
os.environ.setdefault("WEATHERSNAP_GEOLOCATION", "none")
os.environ.setdefault("WEATHERSNAP_LOG_LEVEL", "WARNING")

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker
