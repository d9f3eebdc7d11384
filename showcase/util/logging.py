"""Stdlib logging setup for the API process and maintenance scripts."""

import logging
import sys

from showcase.config import Settings

# Libraries whose INFO output drowns out request logs
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Route log records to stdout.

    Debug mode lowers the showcase package to DEBUG; everything else stays at
    INFO, and chatty third-party clients are held at WARNING.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("showcase").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
