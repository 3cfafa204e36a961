from __future__ import annotations

from typing import Any, Dict


def make_payload(
    name: str = "London",
    *,
    temp: float = 21.7,
    feels_like: float = 20.2,
    humidity: int = 63,
    condition: str = "Clouds",
    description: str = "broken clouds",
    wind_speed: float = 4.1,
    country: str = "GB",
) -> Dict[str, Any]:
    return {
        "name": name,
        "sys": {"country": country},
        "main": {"temp": temp, "feels_like": feels_like, "humidity": humidity},
        "weather": [{"main": condition, "description": description, "icon": "04d"}],
        "wind": {"speed": wind_speed},
    }
