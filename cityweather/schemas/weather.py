from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


class _ProviderModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Coordinates(_ProviderModel):
    lon: float
    lat: float


class WeatherCondition(_ProviderModel):
    id: int
    main: str
    description: str
    icon: str


class MainMetrics(_ProviderModel):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    sea_level: int | None = None
    grnd_level: int | None = None


class Wind(_ProviderModel):
    speed: float
    deg: int
    gust: float | None = None


class Clouds(_ProviderModel):
    all: int = Field(ge=0, le=100)


class SystemInfo(_ProviderModel):
    type: int | None = None
    id: int | None = None
    country: str
    sunrise: int
    sunset: int


class WeatherResult(_ProviderModel):
    coord: Coordinates
    weather: tuple[WeatherCondition, ...] = Field(min_length=1)
    base: str | None = None
    main: MainMetrics
    visibility: int | None = None
    wind: Wind
    clouds: Clouds
    dt: int
    sys: SystemInfo
    timezone: int
    id: int
    name: str
    cod: int

    @property
    def condition(self) -> WeatherCondition:
        return self.weather[0]

    @property
    def icon_url(self) -> str:
        return OPENWEATHER_ICON_URL.format(icon=self.condition.icon)


class ProviderErrorPayload(_ProviderModel):
    cod: int
    message: str
