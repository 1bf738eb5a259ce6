from __future__ import annotations

from fastapi import APIRouter, HTTPException

from cityweather.api.deps import FirstQueryParams, WeatherService
from cityweather.schemas.weather import WeatherResult
from cityweather.services.weather import Ok

router = APIRouter(prefix="/weather")


@router.get("", response_model=WeatherResult)
async def current_weather(params: FirstQueryParams, service: WeatherService) -> WeatherResult:
    # Unparsed params keep "?q=" distinguishable from a missing q.
    outcome = await service.lookup(params)
    if isinstance(outcome, Ok):
        return outcome.value
    raise HTTPException(
        status_code=outcome.error.status_code,
        detail=outcome.error.reason,
    ) from outcome.error
