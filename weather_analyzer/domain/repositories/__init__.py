"""Repository interfaces."""

from .weather_repository import WeatherRepository

__all__ = [
    "WeatherRepository",
]
