"""Application services."""

from .weather_report_service import WeatherReport, WeatherReportService

__all__ = [
    "WeatherReport",
    "WeatherReportService",
]
