"""Weather data models."""

from pydantic import BaseModel, Field


class MainReadings(BaseModel):
    """The "main" section of a weather response."""

    temp: float
    humidity: float


class WindReadings(BaseModel):
    """The "wind" section of a weather response."""

    speed: float


class Condition(BaseModel):
    """One entry of the "weather" list."""

    description: str


class WeatherRecord(BaseModel):
    """Current weather for one city, as returned by the proxy.

    Only the fields the UI displays are kept; everything else in the
    upstream body is ignored.
    """

    name: str
    main: MainReadings
    wind: WindReadings
    weather: list[Condition] = Field(min_length=1)

    @property
    def temperature_c(self) -> float:
        return self.main.temp

    @property
    def humidity_pct(self) -> float:
        return self.main.humidity

    @property
    def wind_speed_ms(self) -> float:
        return self.wind.speed

    @property
    def description(self) -> str:
        return self.weather[0].description
