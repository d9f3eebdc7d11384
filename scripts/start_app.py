#!/usr/bin/env python3
"""Serve the Showcase API under uvicorn.

Logfire and stdlib logging are configured before the app module is imported,
so failures while building the container are traced too.
"""

import sys

import logfire
import uvicorn

from showcase.config import Settings
from showcase.util.logging import setup_logging
from showcase.util.observability import configure_logfire

APP_PATH = "showcase.interface.api.app:app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Showcase API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Showcase API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
