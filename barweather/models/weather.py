"""OpenWeatherMap One Call response models and the observation the core consumes."""

from dataclasses import dataclass

from pydantic import BaseModel, Field


class WeatherEntry(BaseModel):
    id: int = Field(ge=0)
    main: str
    description: str
    icon: str


class CurrentConditions(BaseModel):
    dt: int
    sunrise: int = 0
    sunset: int = 0
    temp: float
    feels_like: float
    pressure: int
    humidity: int = Field(ge=0, le=100)
    dew_point: float
    uvi: float
    clouds: int = Field(ge=0, le=100)
    visibility: int = 10000  # omitted by the provider for some locations
    wind_speed: float
    wind_deg: int
    wind_gust: float = 0.0
    weather: list[WeatherEntry] = Field(min_length=1)


class OneCallResponse(BaseModel):
    lat: float
    lon: float
    timezone: str
    timezone_offset: int
    current: CurrentConditions


@dataclass(frozen=True)
class WeatherObservation:
    code: int
    description: str
    observed_at: int  # unix seconds
    temperature: float  # Celsius
    sunrise: int = 0
    sunset: int = 0

    @classmethod
    def from_response(cls, response: OneCallResponse) -> "WeatherObservation":
        """Take the fields the status line needs from the first weather entry."""
        current = response.current
        primary = current.weather[0]
        return cls(
            code=primary.id,
            description=primary.description,
            observed_at=current.dt,
            temperature=current.temp,
            sunrise=current.sunrise,
            sunset=current.sunset,
        )
