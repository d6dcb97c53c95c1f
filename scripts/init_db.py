#!/usr/bin/env python3
"""Create the comment schema directly, without Alembic (local setups)."""

import asyncio
import sys

import logfire

from flowthread.config import Settings
from flowthread.persistence.database import create_engine, ensure_schema
from flowthread.util.logging import setup_logging
from flowthread.util.observability import configure_logfire


async def _run(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await ensure_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        asyncio.run(_run(settings))
        return 0
    except Exception as e:
        logfire.error(
            "Schema provisioning failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
