"""Error types raised while resolving and fetching current weather."""

from __future__ import annotations

UPSTREAM_UNAVAILABLE = "Weather provider unavailable"
CITY_ERROR_STATUSES = frozenset({400, 404})


class CityWeatherError(Exception):
    """Base error for weather lookups."""

    status_code: int = 500

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidRequest(CityWeatherError):
    """The inbound request is missing required input."""

    def __init__(self, reason: str, *, status_code: int = 400) -> None:
        super().__init__(reason)
        self.status_code = status_code


class UpstreamError(CityWeatherError):
    """The provider call failed in transport or its body could not be decoded."""

    status_code = 502

    def __init__(self, reason: str, *, cause: BaseException | None = None) -> None:
        super().__init__(reason)
        self.cause = cause


class UpstreamSemanticError(UpstreamError):
    """The provider answered with an application-level error payload.

    Only 400 and 404 are caused by the requested city and are passed on with
    the provider's message. Any other code, such as a bad key or an exhausted
    quota, is a server-side failure and reads as a bad gateway.
    """

    def __init__(self, reason: str, *, status_code: int) -> None:
        if status_code in CITY_ERROR_STATUSES:
            super().__init__(reason)
            self.status_code = status_code
        else:
            super().__init__(UPSTREAM_UNAVAILABLE)
        self.provider_status = status_code
        self.provider_message = reason
