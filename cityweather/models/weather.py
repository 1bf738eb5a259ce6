from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CITY = "nairobi"


@dataclass(frozen=True)
class WeatherQuery:
    city: str = DEFAULT_CITY
