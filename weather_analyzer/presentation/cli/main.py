"""CLI interface for the weather data analyzer."""

import argparse
import logging
import sys
from typing import List, Optional

from ...application.services.weather_report_service import (
    WeatherReport,
    WeatherReportService,
)
from ...domain.exceptions import WeatherDataError
from ...infrastructure.repositories.csv_weather_repository import CSVWeatherRepository

from config.settings import LOG_FORMAT, REPORT_SETTINGS, WEATHER_DATA_FILE

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarize daily weather observations from a CSV file"
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=str(WEATHER_DATA_FILE),
        help="CSV file with Date,Temperature,Humidity,Precipitation rows",
    )
    parser.add_argument(
        "--month",
        type=str,
        default=REPORT_SETTINGS["month"],
        help="Month prefix for the average temperature, e.g. '2025-02'",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=REPORT_SETTINGS["threshold"],
        help="List days with temperature above this value",
    )
    parser.add_argument(
        "--sample-temperature",
        type=float,
        default=REPORT_SETTINGS["sample_temperature"],
        help="Temperature to categorize as Hot/Warm/Cold",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_report(report: WeatherReport) -> List[str]:
    """Render the report as output lines."""
    average = f"{report.average_temperature:.2f}" if report.has_average else "n/a"
    lines = [f"Average Temperature ({report.month}): {average}"]

    lines.append(f"Days Above {report.threshold}C: {len(report.days_above)}")
    for record in report.days_above:
        lines.append(f"  • {record}")

    lines.append(f"Rainy Days: {report.rainy_days}")
    lines.append(
        f"Temperature Category ({report.sample_temperature}C): {report.sample_category}"
    )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    service = WeatherReportService(CSVWeatherRepository(args.data_file))
    try:
        report = service.build_report(
            month=args.month,
            threshold=args.threshold,
            sample_temperature=args.sample_temperature,
        )
    except WeatherDataError as e:
        print(f"Error reading weather data: {e}", file=sys.stderr)
        return 1

    for line in format_report(report):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
