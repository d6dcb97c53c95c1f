"""Cascade erase domain service."""

from abc import ABC, abstractmethod

import logfire

from flowthread.domain.model import Comment, CommentQueryResult
from flowthread.domain.repository import CommentRepository

from .base import Service


class RemovalNotifier(ABC):
    """Receives a signal for every comment permanently removed."""

    @abstractmethod
    async def comment_removed(self, comment: Comment) -> None:
        """Handle the removal of a comment row."""
        pass


class CommentEraseService(Service):
    """Domain service permanently removing previously fetched comments."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        removal_notifier: RemovalNotifier,
    ) -> None:
        """Initialize erase service.

        Args:
            comment_repository: Comment repository
            removal_notifier: Notified per removed comment when requested
        """
        self.comment_repository = comment_repository
        self.removal_notifier = removal_notifier

    async def erase(self, result: CommentQueryResult, notify: bool = False) -> int:
        """Delete every comment held by a query result.

        Rows that are already gone are skipped and not counted, so erasing
        the same comments twice deletes nothing the second time. Removal
        notifications are only sent when ``notify`` is true; the cascade run
        on page removal leaves it off. Notifications are sent once every
        delete has succeeded.

        The cascade is all-or-nothing: if any delete fails, the deletes
        already issued are rolled back, the error propagates and the result
        keeps its comments. On success the result is cleared.

        Args:
            result: Result of a previous fetch
            notify: Whether to signal each removal to the notifier

        Returns:
            Number of rows actually deleted
        """
        with logfire.span(
            "comment_erase.erase",
            page_id=result.query.page_id,
            count=len(result),
            notify=notify,
        ):
            if not result:
                return 0

            removed: list[Comment] = []
            try:
                async with self.comment_repository.atomic():
                    for comment in result:
                        if await self.comment_repository.delete(comment.id):
                            removed.append(comment)
            except Exception as e:
                logfire.error(
                    "Comment erase aborted",
                    page_id=result.query.page_id,
                    attempted=len(result),
                    error=str(e),
                )
                raise

            result.clear()

            if notify:
                for comment in removed:
                    await self.removal_notifier.comment_removed(comment)

            logfire.info(
                "Comments erased", page_id=result.query.page_id, erased=len(removed)
            )
            return len(removed)
