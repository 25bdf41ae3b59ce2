"""Weather record entity."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class WeatherRecord:
    """Represents one daily weather observation."""

    date: str  # YYYY-MM-DD, matched by prefix only
    temperature: float  # Celsius
    humidity: float  # percentage
    precipitation: float  # mm

    @property
    def is_rainy(self) -> bool:
        return self.precipitation > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "precipitation": self.precipitation,
        }

    def __str__(self) -> str:
        return (
            f"{self.date}: {self.temperature}C, "
            f"{self.humidity}%, {self.precipitation}mm"
        )
