"""Text rendering of an observation."""
from __future__ import annotations

import math
from typing import List

from .abstractions import WeatherObservation


LOADING_TEXT = "Getting weather data..."


def format_temperature(value: float) -> int:
    """Round half up, so ``21.5 -> 22`` and ``-0.5 -> 0``."""
    return math.floor(value + 0.5)


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def render_observation(observation: WeatherObservation) -> List[str]:
    return [
        observation.location_name,
        observation.country_code,
        f"{format_temperature(observation.temperature_c)}°C",
        capitalize_words(observation.description),
        f"Feels like {format_temperature(observation.feels_like_c)}°C",
        f"Humidity {observation.humidity_pct}%",
        f"Wind {format_temperature(observation.wind_speed_ms)} m/s",
    ]


__all__ = ["LOADING_TEXT", "format_temperature", "capitalize_words", "render_observation"]
