"""Removal notifier implementations.

Delivery of removal notices to users is handled by the host application;
this service only emits the signal.
"""

import logfire

from flowthread.domain.model import Comment
from flowthread.domain.service import RemovalNotifier


class LogfireRemovalNotifier(RemovalNotifier):
    """Emits each removal as a structured logfire event."""

    async def comment_removed(self, comment: Comment) -> None:
        logfire.info(
            "Comment removed",
            comment_id=comment.id.hex(),
            page_id=comment.page_id,
            author=comment.author.root,
        )


class RecordingRemovalNotifier(RemovalNotifier):
    """Keeps removed comments in memory, for tests."""

    def __init__(self) -> None:
        self.removed: list[Comment] = []

    async def comment_removed(self, comment: Comment) -> None:
        self.removed.append(comment)
