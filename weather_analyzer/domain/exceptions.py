"""Errors raised while loading weather data."""

from typing import Optional


class WeatherDataError(Exception):
    """Base class for weather data loading failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ReadError(WeatherDataError):
    """The data file could not be opened or read."""


class ParseError(WeatherDataError):
    """A data line has the wrong number of fields or a non-numeric value."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        row_number: Optional[int] = None,
    ):
        super().__init__(message, path)
        self.row_number = row_number  # 1-based, header and blank lines not counted
