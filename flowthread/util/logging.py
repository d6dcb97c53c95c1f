"""Logging configuration for the application."""

import logging
import sys

from flowthread.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Application events go through logfire; this configures the stdlib
    loggers used by uvicorn, SQLAlchemy and alembic.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # SQL echo is handled by the engine; keep the pool quiet
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("flowthread").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
