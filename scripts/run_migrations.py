#!/usr/bin/env python3
"""Upgrade the Showcase schema (profiles, works, votes, comments) to head.

Run before the API starts; a failure exits non-zero so the deploy stops
instead of serving against a stale schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from showcase.config import Settings
from showcase.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config(ALEMBIC_INI)
    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(alembic_cfg, "head")
        except Exception as e:
            logfire.error(
                "Schema migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
