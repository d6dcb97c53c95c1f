"""Test configuration and fixtures."""

import itertools
from datetime import datetime, timedelta, timezone

import logfire

from flowthread.domain.model import Comment
from flowthread.domain.value import Author, CommentStatus, PageId, new_comment_id

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

_BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
_clock = itertools.count()


def make_comment(
    page_id: int = 42,
    parent: Comment | None = None,
    author: str = "alice",
    text: str = "Hello",
    status: CommentStatus = CommentStatus.NORMAL,
    report_count: int = 0,
) -> Comment:
    """Helper function to build test comments.

    Each call gets a creation time one second after the previous one, so
    ids sort in creation order.

    Args:
        page_id: Page the comment belongs to
        parent: Comment this one replies to, if any
        author: Author name
        text: Comment text
        status: Moderation status
        report_count: Number of reports

    Returns:
        Comment domain model
    """
    created_at = _BASE_TIME + timedelta(seconds=next(_clock))
    return Comment(
        id=new_comment_id(created_at),
        page_id=PageId(page_id),
        author=Author(author),
        text=text,
        parent_id=parent.id if parent else None,
        status=status,
        report_count=report_count,
        created_at=created_at,
    )
