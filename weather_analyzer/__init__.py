"""Weather data analyzer: CSV loading and daily weather aggregation."""

__version__ = "1.0.0"
