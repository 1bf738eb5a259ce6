import os

import uvicorn

from cityweather.core.config import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "cityweather.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
        server_header=False,
    )


if __name__ == "__main__":
    main()
