from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


Units = Literal["metric", "imperial"]
TimeFormat = Literal["12", "24"]


class Config(BaseModel):
    """User settings stored in thundery.toml. Field order is the file order."""

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    api_key: str = ""
    city: str = ""
    units: Units = "metric"
    # whole hours, at most a year either way
    timeplus: int = Field(default=0, ge=-8760, le=8760)
    timeminus: int = Field(default=0, ge=-8760, le=8760)
    showcityname: bool = False
    showdate: bool = False
    timeformat: TimeFormat = "24"
    use_colors: bool = False

    @field_validator("timeformat", mode="before")
    @classmethod
    def _timeformat_as_str(cls, value):
        # `timeformat = 12` is valid TOML too
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


# ── Provider payload (subset of /data/2.5/weather) ───────────────────────────

class Condition(BaseModel):
    main: str
    description: str = ""


class MainReadings(BaseModel):
    temp: float


class Wind(BaseModel):
    speed: float


class Sys(BaseModel):
    sunrise: int
    sunset: int
    country: Optional[str] = None


class CurrentWeatherPayload(BaseModel):
    name: str = ""
    dt: Optional[int] = None
    weather: List[Condition] = Field(min_length=1)
    main: MainReadings
    wind: Wind
    sys: Sys

    def to_snapshot(self) -> "WeatherSnapshot":
        condition = self.weather[0]
        return WeatherSnapshot(
            city_name=self.name,
            country=self.sys.country,
            condition=condition.main,
            description=condition.description,
            temperature=self.main.temp,
            wind_speed=self.wind.speed,
            sunrise=self.sys.sunrise,
            sunset=self.sys.sunset,
            observed_at=self.dt,
        )


class WeatherSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    city_name: str
    country: Optional[str] = None
    condition: str
    description: str = ""
    temperature: float
    wind_speed: float
    sunrise: int
    sunset: int
    observed_at: Optional[int] = None
