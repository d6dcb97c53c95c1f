#!/usr/bin/env python3
"""Erase every comment of a removed page.

Usage:
    python scripts/purge_page.py PAGE_ID [--strict]
"""

import argparse
import asyncio
import sys

import logfire

from flowthread.adapter.notifier import LogfireRemovalNotifier
from flowthread.application.usecase.page import (
    PurgePageCommentsRequest,
    PurgePageCommentsResponse,
    PurgePageCommentsUseCase,
)
from flowthread.config import Settings
from flowthread.domain.service import CommentEraseService, CommentQueryService
from flowthread.persistence.database import (
    create_engine,
    create_session_factory,
    get_session,
)
from flowthread.persistence.repository import SqlCommentRepository
from flowthread.util.logging import setup_logging
from flowthread.util.observability import configure_logfire


async def purge(
    settings: Settings, page_id: int, strict: bool
) -> PurgePageCommentsResponse:
    engine = create_engine(settings)
    try:
        async with get_session(create_session_factory(engine)) as session:
            repository = SqlCommentRepository(session)
            use_case = PurgePageCommentsUseCase(
                query_service=CommentQueryService(
                    repository, settings.comments.expansion_policy
                ),
                erase_service=CommentEraseService(
                    repository, LogfireRemovalNotifier()
                ),
                strict=strict,
            )
            response = await use_case.execute(
                PurgePageCommentsRequest(page_id=page_id)
            )
            await session.commit()
            return response
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("page_id", type=int)
    parser.add_argument(
        "--strict", action="store_true", help="Raise storage failures"
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    response = asyncio.run(
        purge(settings, args.page_id, args.strict or settings.strict_page_purge)
    )
    print(response.model_dump_json())
    return 1 if response.failed else 0


if __name__ == "__main__":
    sys.exit(main())
