"""Application settings and configuration."""

from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
WEATHER_DATA_FILE = DATA_DIR / "weather_data.csv"

# Report defaults
REPORT_SETTINGS = {
    "month": "2025-02",
    "threshold": 30.0,
    "sample_temperature": 25.0,
}

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
