"""In-memory comment repository for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Collection, Optional

from flowthread.domain.model.comment import Comment
from flowthread.domain.repository.comment import CommentRepository
from flowthread.domain.value import (
    CommentId,
    CommentQuery,
    CommentStatus,
    PageId,
    SortDirection,
    StatusFilter,
)


def _passes_status(comment: Comment, status_filter: StatusFilter) -> bool:
    if status_filter is StatusFilter.ALL:
        return True
    if status_filter is StatusFilter.NORMAL:
        return comment.status is CommentStatus.NORMAL
    if status_filter is StatusFilter.REPORTED:
        return comment.is_reported
    if status_filter is StatusFilter.DELETED:
        return comment.status is CommentStatus.DELETED
    return comment.status is CommentStatus.SPAM


def _sort(comments: list[Comment], direction: SortDirection) -> list[Comment]:
    return sorted(
        comments, key=lambda c: c.id, reverse=direction is SortDirection.OLDER
    )


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Records every storage round-trip in ``calls`` so tests can assert on how
    many queries an operation issued.

    Keyword matching is a case-sensitive substring test, like ``LIKE`` on
    PostgreSQL. SQLite and MySQL with default collations compare
    case-insensitively, so keyword results there can be wider.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self.calls: list[str] = []

    def _matches(self, comment: Comment, query: CommentQuery, roots_only: bool) -> bool:
        if query.page_id and comment.page_id != query.page_id:
            return False
        if query.author and comment.author.root != query.author:
            return False
        if query.keyword and query.keyword not in comment.text:
            return False
        if roots_only and not comment.is_root:
            return False
        return _passes_status(comment, query.status_filter)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        self.calls.append("find_by_id")
        return self._comments.get(comment_id)

    async def find(self, query: CommentQuery, roots_only: bool) -> list[Comment]:
        """Find comments matching the query filters, sorted and paginated."""
        self.calls.append("find")
        comments = [
            c for c in self._comments.values() if self._matches(c, query, roots_only)
        ]
        comments = _sort(comments, query.direction)

        # Paginate
        if query.is_limited:
            return comments[query.offset : query.offset + query.limit]
        return comments[query.offset :]

    async def count_roots(self, query: CommentQuery) -> int:
        """Count root comments matching the query filters."""
        self.calls.append("count_roots")
        return sum(
            1 for c in self._comments.values() if self._matches(c, query, True)
        )

    async def find_children(
        self,
        page_id: PageId,
        parent_ids: Collection[CommentId],
        status_filter: StatusFilter,
        direction: SortDirection,
    ) -> list[Comment]:
        """Find direct replies to any of the given comments."""
        self.calls.append("find_children")
        wanted = set(parent_ids)
        comments = [
            c
            for c in self._comments.values()
            if c.parent_id in wanted
            and (not page_id or c.page_id == page_id)
            and _passes_status(c, status_filter)
        ]
        return _sort(comments, direction)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self.calls.append("save")
        self._comments[comment.id] = comment
        return comment

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Restore the stored comments if the enclosed block raises."""
        snapshot = dict(self._comments)
        try:
            yield
        except BaseException:
            self._comments = snapshot
            raise

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        self.calls.append("delete")
        return self._comments.pop(comment_id, None) is not None
