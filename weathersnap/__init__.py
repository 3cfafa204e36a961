"""WeatherSnap: instant weather for any city."""

__version__ = "0.1.0"
