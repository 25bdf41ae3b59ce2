"""Tests for WeatherReportService."""

import math
from typing import List

import pytest
from weather_analyzer.application.services.weather_report_service import (
    WeatherReportService,
)
from weather_analyzer.domain.entities.temperature_category import TemperatureCategory
from weather_analyzer.domain.entities.weather_record import WeatherRecord
from weather_analyzer.domain.exceptions import ParseError, ReadError
from weather_analyzer.domain.repositories.weather_repository import WeatherRepository
from weather_analyzer.infrastructure.repositories.csv_weather_repository import (
    CSVWeatherRepository,
)


class InMemoryWeatherRepository(WeatherRepository):
    """Repository serving a fixed list of records."""

    def __init__(self, records: List[WeatherRecord]):
        self.records = records
        self.calls = 0

    def get_weather_data(self) -> List[WeatherRecord]:
        self.calls += 1
        return self.records


def test_build_report(records):
    """All four aggregations are computed from one load."""
    repo = InMemoryWeatherRepository(records)
    service = WeatherReportService(repo)

    report = service.build_report(month="2025-02", threshold=30.0, sample_temperature=25)

    assert repo.calls == 1
    assert report.average_temperature == pytest.approx(15.0)
    assert report.has_average
    assert [r.date for r in report.days_above] == ["2025-01-04", "2025-03-01"]
    assert report.rainy_days == 3
    assert report.total_days == 5
    assert report.dry_days == 2
    assert report.sample_category is TemperatureCategory.WARM


def test_build_report_month_without_data(records):
    """A month with no records gives a NaN average, not an error."""
    service = WeatherReportService(InMemoryWeatherRepository(records))

    report = service.build_report(month="2099-01", threshold=30.0, sample_temperature=35)

    assert math.isnan(report.average_temperature)
    assert not report.has_average
    assert report.to_dict()["average_temperature"] is None
    assert report.sample_category is TemperatureCategory.HOT


def test_report_to_dict(records):
    """Report serializes to plain values."""
    service = WeatherReportService(InMemoryWeatherRepository(records))
    data = service.build_report("2025-03", 50.0, -5).to_dict()

    assert data["month"] == "2025-03"
    assert data["average_temperature"] == pytest.approx(64.5)
    assert data["days_above"] == [
        {"date": "2025-03-01", "temperature": 99.0, "humidity": 10.0, "precipitation": 0.0001}
    ]
    assert data["rainy_days"] + data["dry_days"] == data["total_days"]
    assert data["sample_category"] == "Cold"


def test_build_report_from_csv(write_csv):
    """Service works end to end over a CSV file."""
    path = write_csv(
        "2025-02-01,10,50,0\n"
        "2025-02-15,20,60,2.5\n"
        "2025-03-01,99,10,0\n"
    )
    service = WeatherReportService(CSVWeatherRepository(path))

    report = service.build_report("2025-02", 15.0, 25.9)

    assert report.average_temperature == pytest.approx(15.0)
    assert [r.date for r in report.days_above] == ["2025-02-15", "2025-03-01"]
    assert report.rainy_days == 1
    assert report.sample_category is TemperatureCategory.WARM


def test_build_report_propagates_load_errors(write_csv, tmp_path):
    """Loader errors reach the caller with no partial report."""
    with pytest.raises(ReadError):
        WeatherReportService(CSVWeatherRepository(tmp_path / "missing.csv")).build_report(
            "2025-02", 30.0, 25.0
        )

    path = write_csv("2025-02-01,10,50\n")
    with pytest.raises(ParseError):
        WeatherReportService(CSVWeatherRepository(path)).build_report("2025-02", 30.0, 25.0)
