"""Fetch-and-render state machine behind the weather lookup widget."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from ..abstractions import (
    ByCoordinates,
    ByName,
    Failed,
    Geolocator,
    Idle,
    Loading,
    QueryState,
    Success,
    Theme,
    WeatherClient,
    WeatherObservation,
    WeatherRequest,
)
from ..errors import GeolocationUnavailable, ValidationError
from ..notices import Notice, NoticeSink, Severity


logger = logging.getLogger(__name__)

FETCH_FAILED = "city not found or network error"
LOCATION_DENIED = "location access denied"

StateListener = Callable[[QueryState], None]


def derive_theme(condition: str) -> Theme:
    """Pick the background theme for a condition category.

    Checks run in a fixed order and the first match wins: clear/sun, cloud,
    rain/drizzle, snow. "Cloudy with rain" is therefore ``Theme.CLOUDY``.
    """
    weather = condition.lower()
    if "clear" in weather or "sun" in weather:
        return Theme.SUNNY
    if "cloud" in weather:
        return Theme.CLOUDY
    if "rain" in weather or "drizzle" in weather:
        return Theme.RAINY
    if "snow" in weather:
        return Theme.SNOWY
    return Theme.DEFAULT


class WeatherQueryController:
    """Owns the input text, the query state and the derived theme.

    State only changes from coroutines running on the event loop. Blocking
    HTTP calls are pushed to a worker thread and the result is applied back
    on the loop, so the last request to settle wins.
    """

    def __init__(
        self,
        client: WeatherClient,
        *,
        geolocator: Optional[Geolocator] = None,
        notify: Optional[NoticeSink] = None,
    ) -> None:
        self.client = client
        self.geolocator = geolocator
        self._notify = notify
        self._listeners: List[StateListener] = []
        self.city = ""
        self.state: QueryState = Idle()
        self.theme = Theme.DEFAULT

    # Public API ---------------------------------------------------------
    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def observation(self) -> Optional[WeatherObservation]:
        if isinstance(self.state, Success):
            return self.state.observation
        return None

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def set_city(self, text: str) -> None:
        self.city = text

    async def submit(self) -> QueryState:
        return await self.submit_by_name(self.city)

    async def submit_by_name(self, name: str) -> QueryState:
        try:
            request = self._validate(name)
        except ValidationError as exc:
            self._emit(Notice(str(exc), severity=Severity.DESTRUCTIVE))
            return self.state

        self._transition(Loading())
        observation = await self._fetch(
            request,
            failure=Notice(
                "Error fetching weather",
                "Please check the city name and try again",
                Severity.DESTRUCTIVE,
            ),
        )
        if observation is not None:
            self._succeed(observation, title="Weather updated!")
        return self.state

    async def submit_by_location(self) -> QueryState:
        try:
            geolocator = self._require_geolocator()
        except GeolocationUnavailable as exc:
            self._emit(Notice(str(exc), "Please enter a city manually", Severity.DESTRUCTIVE))
            return self.state

        self._transition(Loading())
        try:
            position = await geolocator.locate()
        except Exception as exc:  # noqa: BLE001 - any acquisition failure is a denial
            logger.warning("Geolocation failed: %s", exc)
            self._transition(Failed(LOCATION_DENIED))
            self._emit(
                Notice("Location access denied", "Please enter a city manually", Severity.DESTRUCTIVE)
            )
            return self.state

        observation = await self._fetch(
            ByCoordinates(latitude=position.latitude, longitude=position.longitude),
            failure=Notice(
                "Error getting location weather",
                "Please try searching manually",
                Severity.DESTRUCTIVE,
            ),
        )
        if observation is not None:
            self.city = observation.location_name
            self._succeed(observation, title="Location detected!")
        return self.state

    # Helpers ------------------------------------------------------------
    def _validate(self, name: str) -> ByName:
        if not name.strip():
            raise ValidationError("Please enter a city name")
        return ByName(city=name)

    def _require_geolocator(self) -> Geolocator:
        if self.geolocator is None or not self.geolocator.available:
            raise GeolocationUnavailable("Geolocation not supported")
        return self.geolocator

    async def _fetch(self, request: WeatherRequest, *, failure: Notice) -> Optional[WeatherObservation]:
        try:
            return await asyncio.to_thread(self.client.fetch, request)
        except Exception as exc:  # noqa: BLE001 - every failure ends in Failed
            logger.error("Error fetching weather from %s for %s", self.client.name, request, exc_info=exc)
            self._transition(Failed(FETCH_FAILED))
            self._emit(failure)
            return None

    def _succeed(self, observation: WeatherObservation, *, title: str) -> None:
        self.theme = derive_theme(observation.condition)
        self._transition(Success(observation))
        self._emit(Notice(title, f"Showing weather for {observation.location_name}"))

    def _transition(self, state: QueryState) -> None:
        self.state = state
        for listener in self._listeners:
            try:
                listener(state)
            except Exception:  # noqa: BLE001 - listeners never block a transition
                logger.exception("State listener %r failed", listener)

    def _emit(self, notice: Notice) -> None:
        if self._notify is not None:
            self._notify(notice)


__all__ = ["WeatherQueryController", "derive_theme", "FETCH_FAILED", "LOCATION_DENIED"]
