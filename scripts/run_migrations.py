#!/usr/bin/env python3
"""Apply database migrations with Logfire error tracking."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from linkboard.config import Settings
from linkboard.util.logging import setup_logging
from linkboard.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head and report failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations")

        command.upgrade(Config("alembic.ini"), "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail loudly so the app never starts on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
