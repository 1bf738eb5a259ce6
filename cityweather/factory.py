from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from cityweather.api.router import api_router
from cityweather.clients.openweather import OpenWeatherClient
from cityweather.core.config import Settings, load_settings
from cityweather.core.logging import configure_logging
from cityweather.web.router import ui_router

logger = logging.getLogger(__name__)


def create_weather_client(settings: Settings) -> OpenWeatherClient:
    return OpenWeatherClient(
        api_key=settings.openweather_api_key,
        timeout_seconds=settings.weather_timeout_seconds,
        base_url=str(settings.openweather_base_url),
        units=settings.weather_units,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        app.state.weather_client = create_weather_client(settings)
        if not settings.openweather_api_key:
            logger.warning("OPENWEATHER_API_KEY is not set; provider calls will be rejected")
        yield
        await app.state.weather_client.aclose()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="City Weather",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    if settings.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    @app.get("/healthz", tags=["meta"])
    def healthz():
        return {"name": "cityweather", "status": "ok"}

    app.include_router(api_router)
    app.include_router(ui_router)
    return app
