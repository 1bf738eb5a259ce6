from __future__ import annotations

from fastapi import APIRouter, Request

from cityweather.api.deps import FirstQueryParams, WeatherService
from cityweather.core.errors import CityWeatherError
from cityweather.services.weather import Ok
from cityweather.web.templates import templates

router = APIRouter()

PAGE_TITLE = "Weather App"
PAGE_DESCRIPTION = "Get Current Weather Information !"


def _render_error(request: Request, error: CityWeatherError):
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": PAGE_TITLE,
            "description": PAGE_DESCRIPTION,
            "status_code": error.status_code,
            "reason": error.reason,
        },
        status_code=error.status_code,
    )


@router.get("/")
async def weather_page(request: Request, params: FirstQueryParams, service: WeatherService):
    outcome = await service.lookup(params)
    if not isinstance(outcome, Ok):
        return _render_error(request, outcome.error)

    settings = request.app.state.settings
    return templates.TemplateResponse(
        request,
        "weather.html",
        {
            "title": PAGE_TITLE,
            "description": PAGE_DESCRIPTION,
            "weather": outcome.value,
            "q": params.get("q", ""),
            "locations": settings.featured_cities,
        },
    )
