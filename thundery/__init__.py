"""Terminal weather report for a single city, backed by OpenWeatherMap."""

__version__ = "0.1.0"
