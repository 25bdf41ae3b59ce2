"""Concrete repository implementations."""

from .csv_weather_repository import CSVWeatherRepository, parse_csv

__all__ = [
    "CSVWeatherRepository",
    "parse_csv",
]
