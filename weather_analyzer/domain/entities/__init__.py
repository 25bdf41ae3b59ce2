"""Domain entities."""

from .weather_record import WeatherRecord
from .temperature_category import TemperatureCategory

__all__ = [
    "WeatherRecord",
    "TemperatureCategory",
]
