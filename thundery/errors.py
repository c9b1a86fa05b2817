from typing import Optional


class ThunderyError(Exception):
    """Base class for errors reported to the user before exiting."""


class ConfigError(ThunderyError):
    """The config file could not be read, written or validated."""


class WeatherError(ThunderyError):
    """The weather provider could not be reached or returned unusable data."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
