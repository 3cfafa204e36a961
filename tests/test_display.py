from __future__ import annotations

import pytest

from weathersnap.core.display import capitalize_words, format_temperature, render_observation
from weathersnap.core.providers.openweather import parse_observation

from payloads import make_payload


@pytest.mark.parametrize(
    "value, expected",
    [
        (21.4, 21),
        (21.5, 22),
        (21.7, 22),
        (22.5, 23),
        (-0.4, 0),
        (-0.5, 0),
        (-1.5, -1),
        (-2.6, -3),
    ],
)
def test_format_temperature_rounds_half_up(value, expected):
    assert format_temperature(value) == expected


def test_capitalize_words():
    assert capitalize_words("light intensity drizzle") == "Light Intensity Drizzle"


def test_render_observation():
    observation = parse_observation(
        make_payload("London", temp=21.7, feels_like=20.2, humidity=63, wind_speed=4.6)
    )

    assert render_observation(observation) == [
        "London",
        "GB",
        "22°C",
        "Broken Clouds",
        "Feels like 20°C",
        "Humidity 63%",
        "Wind 5 m/s",
    ]
