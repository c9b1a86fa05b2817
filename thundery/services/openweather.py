import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from thundery.errors import WeatherError
from thundery.models import CurrentWeatherPayload, WeatherSnapshot

logger = logging.getLogger(__name__)

CONFIG_HINT = (
    "your API key and/or city name are missing from the config file; if they aren't, "
    "check the spelling of your city at https://openweathermap.org/"
)


class OpenWeatherClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout_seconds
        self.transport = transport

    def get_current(self, city: str, units: str) -> Dict[str, Any]:
        url = f"{self.base_url}/weather"
        params = {"q": city, "units": units, "appid": self.api_key}
        logger.debug("GET %s q=%s units=%s", url, city, units)
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            r = client.get(url, params=params)
            logger.debug("OpenWeatherMap answered %s", r.status_code)
            r.raise_for_status()
            return r.json()

    def get_snapshot(self, city: str, units: str) -> WeatherSnapshot:
        """Fetch current weather for `city`; every failure surfaces as WeatherError."""
        try:
            data = self.get_current(city, units)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            message = f"Failed to fetch weather data: provider answered HTTP {status}"
            if status in (401, 404):
                message = f"{message}: {CONFIG_HINT}"
            raise WeatherError(message, status_code=status) from exc
        except httpx.HTTPError as exc:
            raise WeatherError(f"Failed to fetch weather data: could not reach {self.base_url}: {exc}") from exc
        except ValueError as exc:
            raise WeatherError(f"Failed to fetch weather data: response is not valid JSON: {exc}") from exc

        try:
            return CurrentWeatherPayload.model_validate(data).to_snapshot()
        except ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in exc.errors())
            raise WeatherError(f"Unexpected weather data from provider (problem with: {fields})") from exc
