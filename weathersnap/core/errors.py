"""Errors raised by the weather lookup stack."""
from __future__ import annotations


class WeatherSnapError(RuntimeError):
    """Base error."""


class ValidationError(WeatherSnapError):
    """Raised when the user input cannot be submitted."""


class NetworkError(WeatherSnapError):
    """Raised on non-2xx responses, transport failures and unusable payloads."""


class GeolocationUnavailable(WeatherSnapError):
    """Raised when no geolocation source is available."""


class GeolocationDenied(WeatherSnapError):
    """Raised when the device position could not be acquired."""


__all__ = [
    "WeatherSnapError",
    "ValidationError",
    "NetworkError",
    "GeolocationUnavailable",
    "GeolocationDenied",
]
