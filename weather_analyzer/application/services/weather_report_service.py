"""Service producing the weather report from a repository."""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List

from ...domain.entities.temperature_category import TemperatureCategory
from ...domain.entities.weather_record import WeatherRecord
from ...domain.repositories.weather_repository import WeatherRepository
from ...domain.use_cases.analyze_weather import (
    average_temperature_for_month,
    categorize_temperature,
    count_rainy_days,
    days_above_temperature,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherReport:
    """Results of one reporting run."""

    month: str
    average_temperature: float  # NaN when no record falls in the month
    threshold: float
    days_above: List[WeatherRecord]
    rainy_days: int
    total_days: int
    sample_temperature: float
    sample_category: TemperatureCategory

    @property
    def has_average(self) -> bool:
        return not math.isnan(self.average_temperature)

    @property
    def dry_days(self) -> int:
        return self.total_days - self.rainy_days

    def to_dict(self) -> Dict[str, Any]:
        return {
            "month": self.month,
            "average_temperature": self.average_temperature if self.has_average else None,
            "threshold": self.threshold,
            "days_above": [r.to_dict() for r in self.days_above],
            "rainy_days": self.rainy_days,
            "dry_days": self.dry_days,
            "total_days": self.total_days,
            "sample_temperature": self.sample_temperature,
            "sample_category": self.sample_category.value,
        }


class WeatherReportService:
    """Loads weather records once and runs every aggregation over them."""

    def __init__(self, weather_repo: WeatherRepository):
        self.weather_repo = weather_repo

    def build_report(
        self,
        month: str,
        threshold: float,
        sample_temperature: float,
    ) -> WeatherReport:
        """
        Build the weather report.

        Args:
            month: Month prefix for the average, e.g. "2025-02"
            threshold: Temperature above which a day is listed
            sample_temperature: Temperature to categorize

        Returns:
            WeatherReport with all four aggregations

        Raises:
            ReadError, ParseError: Propagated from the repository
        """
        records = self.weather_repo.get_weather_data()
        logger.info(f"Building report over {len(records)} records")

        report = WeatherReport(
            month=month,
            average_temperature=average_temperature_for_month(records, month),
            threshold=threshold,
            days_above=days_above_temperature(records, threshold),
            rainy_days=count_rainy_days(records),
            total_days=len(records),
            sample_temperature=sample_temperature,
            sample_category=categorize_temperature(sample_temperature),
        )

        if not report.has_average:
            logger.warning(f"No records found for month {month}")
        return report
