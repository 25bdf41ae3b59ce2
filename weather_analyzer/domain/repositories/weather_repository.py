"""Weather repository interface."""

from abc import ABC, abstractmethod
from typing import List
from ..entities.weather_record import WeatherRecord


class WeatherRepository(ABC):
    """Abstract repository for weather data access."""

    @abstractmethod
    def get_weather_data(self) -> List[WeatherRecord]:
        """
        Retrieve all weather records in source order.

        Returns:
            List of WeatherRecord entities

        Raises:
            ReadError: If the source cannot be read
            ParseError: If a record in the source is malformed
        """
        pass
