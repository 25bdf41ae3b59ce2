"""Aggregations over a sequence of daily weather records.

Every function here is a read-only reduction: the input sequence is never
modified and no state is kept between calls.
"""

import logging
import math
from typing import List, Sequence

import numpy as np

from ..entities.temperature_category import TemperatureCategory
from ..entities.weather_record import WeatherRecord

logger = logging.getLogger(__name__)


def average_temperature_for_month(
    records: Sequence[WeatherRecord], month: str
) -> float:
    """
    Mean temperature of the records whose date starts with ``month``.

    Args:
        records: Weather records to scan
        month: Literal date prefix, e.g. "2025-02"

    Returns:
        Arithmetic mean of the matching temperatures, or NaN when no
        record matches. Callers must check with ``math.isnan``.
    """
    temps = [r.temperature for r in records if r.date.startswith(month)]
    logger.debug(f"{len(temps)} of {len(records)} records match month {month!r}")
    if not temps:
        return float("nan")
    return float(np.mean(temps))


def count_rainy_days(records: Sequence[WeatherRecord]) -> int:
    """Number of records with precipitation strictly above zero."""
    return sum(1 for r in records if r.is_rainy)


def days_above_temperature(
    records: Sequence[WeatherRecord], threshold: float
) -> List[WeatherRecord]:
    """
    Records hotter than ``threshold``, in their original order.

    A record exactly at the threshold is not included.
    """
    return [r for r in records if r.temperature > threshold]


def categorize_temperature(temperature: float) -> TemperatureCategory:
    """
    Classify a temperature by its truncated decade.

    The temperature is truncated toward zero, then divided by 10 again
    truncating toward zero: 30-49 is Hot, 20-29 is Warm, everything else
    (including negatives and 50+) is Cold.
    """
    if not math.isfinite(temperature):
        return TemperatureCategory.COLD

    decade = int(int(temperature) / 10)
    if decade in (3, 4):
        return TemperatureCategory.HOT
    if decade == 2:
        return TemperatureCategory.WARM
    return TemperatureCategory.COLD
