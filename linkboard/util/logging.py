"""Logging configuration for the launcher scripts."""

import logging
import sys

from linkboard.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for uvicorn and alembic output.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Connection pool chatter is noise outside debug mode
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("linkboard").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
