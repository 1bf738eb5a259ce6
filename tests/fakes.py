from __future__ import annotations

import copy
from typing import Any

from cityweather.core.errors import UpstreamError
from cityweather.models.weather import WeatherQuery
from cityweather.schemas.weather import WeatherResult

NAIROBI_PAYLOAD: dict[str, Any] = {
    "coord": {"lon": 36.8167, "lat": -1.2833},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {
        "temp": 22.5,
        "feels_like": 22.1,
        "temp_min": 21.0,
        "temp_max": 23.9,
        "pressure": 1019,
        "humidity": 46,
        "sea_level": 1019,
        "grnd_level": 836,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 70},
    "clouds": {"all": 0},
    "dt": 1717246800,
    "sys": {
        "type": 1,
        "id": 2558,
        "country": "KE",
        "sunrise": 1717213521,
        "sunset": 1717256866,
    },
    "timezone": 10800,
    "id": 184745,
    "name": "Nairobi",
    "cod": 200,
}


def weather_payload(**overrides: Any) -> dict[str, Any]:
    payload = copy.deepcopy(NAIROBI_PAYLOAD)
    payload.update(overrides)
    return payload


class FakeOpenWeatherClient:
    def __init__(self) -> None:
        self.queries: list[WeatherQuery] = []
        self.payload: dict[str, Any] = weather_payload()
        self.error: UpstreamError | None = None

    async def aclose(self) -> None:
        return None

    async def fetch_current(self, query: WeatherQuery) -> WeatherResult:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        # Echo the requested city so pages reflect the query.
        return WeatherResult.model_validate({**self.payload, "name": query.city.title()})
