"""Temperature category enumeration."""

from enum import Enum


class TemperatureCategory(str, Enum):
    """Enumeration for coarse temperature classification."""

    HOT = "Hot"
    WARM = "Warm"
    COLD = "Cold"

    def __str__(self) -> str:
        return self.value
