from __future__ import annotations

from pydantic import AliasChoices, AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENWEATHER_CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

DEFAULT_FEATURED_CITIES = [
    "Mombasa",
    "Nairobi",
    "Kisumu",
    "Kiribati",
    "Kakamega",
    "Bungoma",
    "Kitui",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore",
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO", min_length=1, max_length=16)

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    # The provider key keeps its conventional unprefixed name.
    openweather_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "openweather_api_key",
            "OPENWEATHER_API_KEY",
            "APP_OPENWEATHER_API_KEY",
        ),
    )
    openweather_base_url: AnyHttpUrl = Field(default=OPENWEATHER_CURRENT_WEATHER_URL)

    weather_units: str = Field(default="metric", pattern=r"^(metric|imperial|standard)$")
    weather_timeout_seconds: float = Field(default=10.0, ge=1.0, le=30.0)

    default_city: str = Field(default="nairobi", min_length=1, max_length=128)
    featured_cities: list[str] = Field(default_factory=lambda: list(DEFAULT_FEATURED_CITIES))

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
