from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cityweather.api import deps
from cityweather.core.config import Settings
from cityweather.factory import create_app
from tests.fakes import FakeOpenWeatherClient


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        openweather_api_key="test-key-1234567890",
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        weather_timeout_seconds=1.0,
    )


@pytest.fixture()
def fake_weather() -> FakeOpenWeatherClient:
    return FakeOpenWeatherClient()


@pytest.fixture()
def client(settings: Settings, fake_weather: FakeOpenWeatherClient) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[deps.get_weather_client] = lambda: fake_weather
    with TestClient(app) as client:
        yield client
