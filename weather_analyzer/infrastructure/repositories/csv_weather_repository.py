"""CSV file weather repository implementation."""

import csv
import io
import logging
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
import pandas as pd

from ...domain.entities.weather_record import WeatherRecord
from ...domain.exceptions import ParseError, ReadError
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

COLUMNS = ["date", "temperature", "humidity", "precipitation"]
NUMERIC_COLUMNS = COLUMNS[1:]


def _read_rows(path: Path) -> pd.DataFrame:
    """Read every data line of ``path`` as text, header line discarded."""
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Cannot read {path}: {e}", path=str(path)) from e

    try:
        return pd.read_csv(
            io.StringIO(text),
            header=None,
            skiprows=1,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            quoting=csv.QUOTE_NONE,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=COLUMNS, dtype=str)
    except pd.errors.ParserError as e:
        raise ParseError(f"Malformed row in {path}: {e}", path=str(path)) from e


def _first_row(mask: pd.Series) -> Optional[int]:
    """1-based data row number of the first True in ``mask``."""
    hits = mask.to_numpy(dtype=bool).nonzero()[0]
    return int(hits[0]) + 1 if len(hits) else None


def _to_float_column(df: pd.DataFrame, col: str, path: Path) -> pd.Series:
    values = df[col].astype(str).str.strip()
    blank = _first_row(values == "")
    if blank is not None:
        raise ParseError(
            f"Empty {col} value in {path}, data row {blank}",
            path=str(path),
            row_number=blank,
        )
    # to_numeric only validates; its fast parser can be off by one ulp
    try:
        pd.to_numeric(values, errors="raise")
    except (ValueError, TypeError) as e:
        row = _first_row(pd.to_numeric(values, errors="coerce").isna())
        raise ParseError(
            f"Non-numeric {col} value in {path}, data row {row}: {e}",
            path=str(path),
            row_number=row,
        ) from e

    floats = values.astype(float)
    not_finite = _first_row(~np.isfinite(floats))
    if not_finite is not None:
        raise ParseError(
            f"Non-finite {col} value in {path}, data row {not_finite}",
            path=str(path),
            row_number=not_finite,
        )
    return floats


def parse_csv(path: Union[str, Path]) -> List[WeatherRecord]:
    """
    Load weather records from a CSV file.

    The first line is treated as a header and discarded without looking at
    it. Every other non-empty line must hold exactly four comma separated
    fields: date, temperature, humidity, precipitation.

    Args:
        path: Path to the CSV file

    Returns:
        List of WeatherRecord entities in file order

    Raises:
        ReadError: If the file cannot be opened or read
        ParseError: If a row has the wrong field count or a non-numeric value
    """
    path = Path(path)
    logger.info(f"Loading weather data from {path}")

    df = _read_rows(path)
    if df.empty:
        logger.info("Loaded 0 weather records")
        return []

    if df.shape[1] != len(COLUMNS):
        raise ParseError(
            f"Expected {len(COLUMNS)} fields per row in {path}, found {df.shape[1]}",
            path=str(path),
            row_number=1,
        )
    df.columns = COLUMNS

    # The tokenizer pads short rows with NaN
    short = _first_row(df.isna().any(axis=1))
    if short is not None:
        raise ParseError(
            f"Expected {len(COLUMNS)} fields per row in {path}, "
            f"data row {short} has fewer",
            path=str(path),
            row_number=short,
        )

    for col in NUMERIC_COLUMNS:
        df[col] = _to_float_column(df, col, path)

    result = [
        WeatherRecord(
            date=str(row.date),
            temperature=float(row.temperature),
            humidity=float(row.humidity),
            precipitation=float(row.precipitation),
        )
        for row in df.itertuples(index=False)
    ]

    logger.info(f"Loaded {len(result)} weather records")
    return result


class CSVWeatherRepository(WeatherRepository):
    """Repository for weather data stored in a local CSV file."""

    def __init__(self, data_file: Union[str, Path]):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV file with weather data
        """
        self.data_file = Path(data_file)

    def get_weather_data(self) -> List[WeatherRecord]:
        """Retrieve weather data from the CSV file."""
        try:
            return parse_csv(self.data_file)
        except (ReadError, ParseError) as e:
            logger.error(f"Error loading weather data: {e}")
            raise
