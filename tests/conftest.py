"""Shared fixtures."""

import pytest

from weather_analyzer.domain.entities.weather_record import WeatherRecord

HEADER = "Date,Temperature,Humidity,Precipitation\n"


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text (header added unless given) and return the path."""

    def _write(body: str, header: str = HEADER, name: str = "weather.csv"):
        path = tmp_path / name
        path.write_text(header + body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def records():
    """Five records spanning January to March, three of them rainy."""
    return [
        WeatherRecord(date="2025-01-04", temperature=35.9, humidity=99.0, precipitation=0.0),
        WeatherRecord(date="2025-02-01", temperature=10.0, humidity=70.0, precipitation=3.2),
        WeatherRecord(date="2025-02-15", temperature=20.0, humidity=50.0, precipitation=0.0),
        WeatherRecord(date="2025-03-01", temperature=99.0, humidity=10.0, precipitation=0.0001),
        WeatherRecord(date="2025-03-02", temperature=30.0, humidity=40.0, precipitation=1.5),
    ]
