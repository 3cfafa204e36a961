"""Core abstractions for the weather lookup domain."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union


@dataclass(frozen=True, slots=True)
class WeatherObservation:
    """Result of one successful current-weather query.

    Values use metric units:
    - temperatures in Celsius
    - humidity in percent
    - wind speed in metres per second (m/s)
    """

    location_name: str
    country_code: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    condition: str
    description: str
    wind_speed_ms: float


@dataclass(frozen=True, slots=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class ByName:
    """Query the current weather for a city name."""

    city: str


@dataclass(frozen=True, slots=True)
class ByCoordinates:
    """Query the current weather for a device position."""

    latitude: float
    longitude: float


WeatherRequest = Union[ByName, ByCoordinates]


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Success:
    observation: WeatherObservation


@dataclass(frozen=True, slots=True)
class Failed:
    reason: str


QueryState = Union[Idle, Loading, Success, Failed]


class Theme(str, Enum):
    """Background theme picked from the condition category."""

    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    DEFAULT = "default"


class WeatherClient(Protocol):
    """A data source capable of returning current weather observations."""

    name: str

    def fetch(self, request: WeatherRequest) -> WeatherObservation:
        """Return the observation for ``request`` or raise ``NetworkError``."""
        ...


class Geolocator(Protocol):
    """A source of the device's current position."""

    available: bool

    async def locate(self) -> Coordinates:
        """Return the current coordinates or raise ``GeolocationDenied``."""
        ...


__all__ = [
    "WeatherObservation",
    "Coordinates",
    "ByName",
    "ByCoordinates",
    "WeatherRequest",
    "Idle",
    "Loading",
    "Success",
    "Failed",
    "QueryState",
    "Theme",
    "WeatherClient",
    "Geolocator",
]
