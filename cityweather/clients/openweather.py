from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from cityweather.core.config import OPENWEATHER_CURRENT_WEATHER_URL
from cityweather.core.errors import UPSTREAM_UNAVAILABLE, UpstreamError, UpstreamSemanticError
from cityweather.models.weather import WeatherQuery
from cityweather.schemas.weather import ProviderErrorPayload, WeatherResult

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Fetches current conditions for one city from OpenWeatherMap.

    Every call is a single round-trip: no retries, no caching. The shared
    ``httpx.AsyncClient`` only pools connections.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        timeout_seconds: float,
        base_url: str = OPENWEATHER_CURRENT_WEATHER_URL,
        units: str = "metric",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._units = units
        self._timeout_seconds = timeout_seconds
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_current(self, query: WeatherQuery) -> WeatherResult:
        """Fetch and decode the current weather for ``query.city``.

        Raises:
            UpstreamSemanticError: the provider returned an error payload
                such as ``{"cod": "404", "message": "city not found"}``.
            UpstreamError: transport failure, timeout, or an undecodable body.
        """
        params: dict[str, Any] = {
            "q": query.city,
            "appid": self._api_key or "",
            "units": self._units,
        }
        logger.info("Fetching current weather for %r", query.city)
        try:
            resp = await asyncio.wait_for(
                self._client.get(self._base_url, params=params),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.warning("Weather request for %r timed out", query.city)
            raise UpstreamError(
                f"Weather provider timed out after {self._timeout_seconds}s", cause=e
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Weather request for %r failed: %s", query.city, e)
            raise UpstreamError(UPSTREAM_UNAVAILABLE, cause=e) from e

        try:
            payload = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(
                "Weather provider returned a non-JSON body (status %s)", resp.status_code
            )
            raise UpstreamError("Weather provider returned an invalid body", cause=e) from e

        return self._decode(payload)

    @staticmethod
    def _decode(payload: Any) -> WeatherResult:
        try:
            return WeatherResult.model_validate(payload)
        except ValidationError as e:
            decode_error = e

        try:
            error = ProviderErrorPayload.model_validate(payload)
        except ValidationError:
            error = None
        if error is not None and error.cod != 200:
            logger.warning("Weather provider error %s: %s", error.cod, error.message)
            raise UpstreamSemanticError(error.message, status_code=error.cod)

        logger.warning("Unexpected weather response shape: %s", decode_error)
        raise UpstreamError(
            "Unexpected weather provider response shape", cause=decode_error
        ) from decode_error
