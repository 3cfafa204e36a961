"""Sources for the device's current position."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import requests

from ..abstractions import Coordinates
from ..errors import GeolocationDenied, NetworkError
from .base import HTTPProvider, RequestConfig


logger = logging.getLogger(__name__)

DEFAULT_IP_GEOLOCATION_URL = "http://ip-api.com/json"


class StaticGeolocator:
    """A device whose position is known up front."""

    available = True

    def __init__(self, latitude: float, longitude: float) -> None:
        self._coordinates = Coordinates(latitude=latitude, longitude=longitude)

    async def locate(self) -> Coordinates:
        return self._coordinates


class IPGeolocator(HTTPProvider):
    """Approximate the device position from its public IP address."""

    available = True

    def __init__(
        self,
        url: str = DEFAULT_IP_GEOLOCATION_URL,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(session=session, request_config=request_config)
        self.url = url

    async def locate(self) -> Coordinates:
        return await asyncio.to_thread(self._lookup)

    def _lookup(self) -> Coordinates:
        try:
            response = self._request("GET", self.url)
            data = self._json(response)
        except NetworkError as exc:
            raise GeolocationDenied(str(exc)) from exc
        if not isinstance(data, dict) or data.get("status") != "success":
            logger.warning("IP geolocation lookup refused: %s", data)
            raise GeolocationDenied("lookup refused")
        try:
            return Coordinates(latitude=float(data["lat"]), longitude=float(data["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise GeolocationDenied("malformed position") from exc


__all__ = ["StaticGeolocator", "IPGeolocator", "DEFAULT_IP_GEOLOCATION_URL"]
