"""Comment entity.

Comments belong to a page and may reply to another comment on the same page,
forming a forest of reply trees. The entity only stores the parent's
identifier; the in-memory parent object is resolved per fetch by
``CommentQueryResult.parent_of``.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from flowthread.domain.model.common import DomainModel
from flowthread.domain.value import Author, CommentId, CommentStatus, PageId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(DomainModel):
    """Comment entity.

    Status is written by the moderation workflow and only read here.
    ``report_count`` is independent of status: a reported comment is a
    NORMAL comment with at least one report.
    """

    id: CommentId
    page_id: PageId = Field(gt=0)
    author: Author
    text: str
    parent_id: Optional[CommentId] = None
    status: CommentStatus = CommentStatus.NORMAL
    report_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def is_root(self) -> bool:
        """Whether this comment starts a thread."""
        return self.parent_id is None

    @property
    def is_reported(self) -> bool:
        """Whether this comment is visible and has been reported."""
        return self.status is CommentStatus.NORMAL and self.report_count > 0
