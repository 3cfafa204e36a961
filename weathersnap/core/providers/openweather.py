"""OpenWeather current weather client."""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

import requests

from ..abstractions import ByCoordinates, ByName, WeatherObservation, WeatherRequest
from ..errors import NetworkError
from .base import HTTPProvider, RequestConfig


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"


def build_params(request: WeatherRequest, api_key: str) -> Dict[str, Any]:
    """Return the query parameters for either kind of request."""
    if isinstance(request, ByName):
        params: Dict[str, Any] = {"q": request.city}
    elif isinstance(request, ByCoordinates):
        params = {"lat": request.latitude, "lon": request.longitude}
    else:
        raise TypeError(f"Unsupported weather request: {request!r}")
    params["appid"] = api_key
    params["units"] = "metric"
    return params


def parse_observation(data: Any) -> WeatherObservation:
    """Map an OpenWeather payload onto a :class:`WeatherObservation`.

    Raises ``NetworkError`` if any consumed field is missing or has the wrong
    type, so a half-filled observation can never be produced.
    """
    try:
        main = data["main"]
        condition = data["weather"][0]
        return WeatherObservation(
            location_name=_require_str(data["name"]),
            country_code=_require_str(data["sys"]["country"]),
            temperature_c=_require_float(main["temp"]),
            feels_like_c=_require_float(main["feels_like"]),
            humidity_pct=_require_humidity(main["humidity"]),
            condition=_require_str(condition["main"]),
            description=_require_str(condition["description"]),
            wind_speed_ms=_require_float(data["wind"]["speed"]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise NetworkError(f"unexpected payload: {exc!r}") from exc


class OpenWeatherClient(HTTPProvider):
    """Integration with the OpenWeather current weather endpoint."""

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(session=session, request_config=request_config)
        self.api_key = api_key
        self.base_url = base_url

    def fetch(self, request: WeatherRequest) -> WeatherObservation:
        params = build_params(request, self.api_key)
        response = self._request("GET", self.base_url, params=params)
        observation = parse_observation(self._json(response))
        logger.info("OpenWeather returned weather for %s", observation.location_name)
        return observation


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


def _require_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"expected finite number, got {value!r}")
    return number


def _require_humidity(value: Any) -> int:
    number = _require_float(value)
    if not number.is_integer() or not 0 <= number <= 100:
        raise ValueError(f"humidity out of range: {value!r}")
    return int(number)


__all__ = ["OpenWeatherClient", "DEFAULT_BASE_URL", "build_params", "parse_observation"]
