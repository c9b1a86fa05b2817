"""
Tests for OpenWeatherClient.
Requests are answered by httpx.MockTransport, so no network access is needed.
"""
import httpx
import pytest

from thundery.errors import WeatherError
from thundery.services.openweather import OpenWeatherClient


SAMPLE_CURRENT = {
    "name": "London",
    "sys": {"country": "GB", "sunrise": 1717214400, "sunset": 1717266600},
    "dt": 1717236000,
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "main": {"temp": 15.0, "feels_like": 14.0, "temp_min": 13.0, "temp_max": 17.0, "pressure": 1013, "humidity": 60},
    "wind": {"speed": 3.5},
    "cod": 200,
}


def _client(handler):
    return OpenWeatherClient(
        "https://api.example.test/data/2.5/",
        "test-key",
        transport=httpx.MockTransport(handler),
    )


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

def test_request_carries_city_units_and_key():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=SAMPLE_CURRENT)

    _client(handler).get_current("London", "imperial")

    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/data/2.5/weather"
    assert request.url.params["q"] == "London"
    assert request.url.params["units"] == "imperial"
    assert request.url.params["appid"] == "test-key"


def test_snapshot_projection():
    snapshot = _client(lambda request: httpx.Response(200, json=SAMPLE_CURRENT)).get_snapshot("London", "metric")

    assert snapshot.city_name == "London"
    assert snapshot.country == "GB"
    assert snapshot.condition == "Clear"
    assert snapshot.description == "clear sky"
    assert snapshot.temperature == 15.0
    assert snapshot.wind_speed == 3.5
    assert snapshot.sunrise == 1717214400
    assert snapshot.sunset == 1717266600
    assert snapshot.observed_at == 1717236000


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_404_raises_weather_error_with_hint():
    client = _client(lambda request: httpx.Response(404, json={"cod": "404", "message": "city not found"}))

    with pytest.raises(WeatherError) as info:
        client.get_snapshot("Atlantis", "metric")

    assert info.value.status_code == 404
    assert "404" in str(info.value)
    assert "city name" in str(info.value)


def test_server_error_raises_weather_error():
    client = _client(lambda request: httpx.Response(503, text="Service Unavailable"))

    with pytest.raises(WeatherError) as info:
        client.get_snapshot("London", "metric")
    assert info.value.status_code == 503


def test_network_error_raises_weather_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(WeatherError, match="could not reach") as info:
        _client(handler).get_snapshot("London", "metric")
    assert info.value.status_code is None


def test_invalid_json_raises_weather_error():
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(WeatherError, match="not valid JSON"):
        client.get_snapshot("London", "metric")


def test_missing_fields_raise_weather_error():
    payload = {k: v for k, v in SAMPLE_CURRENT.items() if k != "wind"}
    client = _client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(WeatherError, match="wind"):
        client.get_snapshot("London", "metric")


def test_empty_condition_list_raises_weather_error():
    payload = dict(SAMPLE_CURRENT, weather=[])
    client = _client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(WeatherError, match="weather"):
        client.get_snapshot("London", "metric")
