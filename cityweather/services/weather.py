from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from cityweather.clients.openweather import OpenWeatherClient
from cityweather.core.errors import InvalidRequest, UpstreamError
from cityweather.models.weather import DEFAULT_CITY, WeatherQuery
from cityweather.schemas.weather import WeatherResult

logger = logging.getLogger(__name__)

CITY_REQUIRED = "City name is required"

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok = True


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E
    ok = False


WeatherOutcome = Union[Ok[WeatherResult], Err[InvalidRequest], Err[UpstreamError]]


def resolve_query(
    params: Mapping[str, str], *, default_city: str = DEFAULT_CITY
) -> WeatherQuery:
    """Build a ``WeatherQuery`` from request query parameters.

    A missing ``q`` falls back to ``default_city``; an explicitly empty one is
    rejected with ``InvalidRequest``.
    """
    city = params.get("q")
    if city is None:
        city = default_city
    if not city:
        raise InvalidRequest(CITY_REQUIRED, status_code=400)
    return WeatherQuery(city=city)


class CurrentWeatherService:
    def __init__(
        self, *, client: OpenWeatherClient, default_city: str = DEFAULT_CITY
    ) -> None:
        self._client = client
        self._default_city = default_city

    async def fetch(self, query: WeatherQuery) -> WeatherResult:
        return await self._client.fetch_current(query)

    async def lookup(self, params: Mapping[str, str]) -> WeatherOutcome:
        try:
            query = resolve_query(params, default_city=self._default_city)
        except InvalidRequest as e:
            return Err(e)
        try:
            result = await self.fetch(query)
        except UpstreamError as e:
            logger.info("Weather lookup for %r failed: %s", query.city, e.reason)
            return Err(e)
        return Ok(result)
