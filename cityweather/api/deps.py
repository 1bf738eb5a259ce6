from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from cityweather.clients.openweather import OpenWeatherClient
from cityweather.core.config import Settings
from cityweather.services.weather import CurrentWeatherService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_query_params(request: Request) -> dict[str, str]:
    # First value wins for repeated keys, as browsers' URLSearchParams.get does.
    params = request.query_params
    return {key: params.getlist(key)[0] for key in params.keys()}


def get_weather_client(request: Request) -> OpenWeatherClient:
    return request.app.state.weather_client


def get_weather_service(
    client: Annotated[OpenWeatherClient, Depends(get_weather_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CurrentWeatherService:
    return CurrentWeatherService(client=client, default_city=settings.default_city)


FirstQueryParams = Annotated[dict[str, str], Depends(get_query_params)]
WeatherService = Annotated[CurrentWeatherService, Depends(get_weather_service)]
