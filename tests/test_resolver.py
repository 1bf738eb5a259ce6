from __future__ import annotations

import asyncio

import pytest

from cityweather.core.errors import InvalidRequest, UpstreamError
from cityweather.models.weather import WeatherQuery
from cityweather.services.weather import (
    CurrentWeatherService,
    Err,
    Ok,
    resolve_query,
)
from tests.fakes import FakeOpenWeatherClient


@pytest.mark.parametrize("city", ["Mombasa", "kisumu", "São Paulo", "  Kitui  "])
def test_non_empty_city_passes_through(city: str) -> None:
    assert resolve_query({"q": city}) == WeatherQuery(city=city)


def test_missing_city_defaults_to_nairobi() -> None:
    assert resolve_query({}).city == "nairobi"


def test_custom_default_city() -> None:
    assert resolve_query({}, default_city="Kakamega").city == "Kakamega"


def test_empty_city_is_rejected() -> None:
    with pytest.raises(InvalidRequest) as exc_info:
        resolve_query({"q": ""})
    assert exc_info.value.status_code == 400
    assert exc_info.value.reason == "City name is required"


def test_lookup_returns_ok() -> None:
    fake = FakeOpenWeatherClient()
    service = CurrentWeatherService(client=fake)

    outcome = asyncio.run(service.lookup({"q": "Kisumu"}))

    assert isinstance(outcome, Ok)
    assert outcome.ok
    assert outcome.value.name == "Kisumu"
    assert fake.queries == [WeatherQuery(city="Kisumu")]


def test_lookup_short_circuits_invalid_request() -> None:
    fake = FakeOpenWeatherClient()
    service = CurrentWeatherService(client=fake)

    outcome = asyncio.run(service.lookup({"q": ""}))

    assert isinstance(outcome, Err)
    assert not outcome.ok
    assert isinstance(outcome.error, InvalidRequest)
    assert fake.queries == []


def test_lookup_wraps_upstream_error() -> None:
    fake = FakeOpenWeatherClient()
    fake.error = UpstreamError("Weather provider unavailable")
    service = CurrentWeatherService(client=fake)

    outcome = asyncio.run(service.lookup({}))

    assert isinstance(outcome, Err)
    assert outcome.error is fake.error
    assert fake.queries == [WeatherQuery(city="nairobi")]
