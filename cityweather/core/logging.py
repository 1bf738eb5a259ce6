from __future__ import annotations

import logging

from cityweather.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("cityweather").setLevel(level)
    # httpx logs every request URL at INFO, which would include the API key.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
