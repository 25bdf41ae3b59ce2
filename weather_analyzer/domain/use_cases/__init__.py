"""Use cases - core business operations."""

from .analyze_weather import (
    average_temperature_for_month,
    categorize_temperature,
    count_rainy_days,
    days_above_temperature,
)

__all__ = [
    "average_temperature_for_month",
    "categorize_temperature",
    "count_rainy_days",
    "days_above_temperature",
]
