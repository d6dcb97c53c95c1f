"""SQL implementation of Comment repository.

Works on every supported dialect (PostgreSQL, MySQL, SQLite). Statements are
built by module-level functions so they can be inspected without a database.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Collection, Dict, List, Optional

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from flowthread.domain.model import Comment
from flowthread.domain.repository import CommentRepository
from flowthread.domain.value import (
    CommentId,
    CommentQuery,
    CommentStatus,
    PageId,
    SortDirection,
    StatusFilter,
)
from flowthread.persistence.mappers import comment_to_dict, row_to_comment
from flowthread.persistence.tables import COMMENT_COLUMNS, comments_table


def status_conditions(status_filter: StatusFilter) -> List[ColumnElement[bool]]:
    """SQL predicates selecting the statuses admitted by a filter."""
    status = comments_table.c.status
    if status_filter is StatusFilter.ALL:
        return []
    if status_filter is StatusFilter.NORMAL:
        return [status == CommentStatus.NORMAL.value]
    if status_filter is StatusFilter.REPORTED:
        return [
            status == CommentStatus.NORMAL.value,
            comments_table.c.report_count > 0,
        ]
    if status_filter is StatusFilter.DELETED:
        return [status == CommentStatus.DELETED.value]
    return [status == CommentStatus.SPAM.value]


def filter_conditions(
    query: CommentQuery, roots_only: bool
) -> List[ColumnElement[bool]]:
    """SQL predicates for the page, author, keyword and status filters."""
    conditions: List[ColumnElement[bool]] = []
    if query.page_id:
        conditions.append(comments_table.c.page_id == query.page_id)
    if query.author:
        conditions.append(comments_table.c.author == query.author)
    if query.keyword:
        conditions.append(
            comments_table.c.text.contains(query.keyword, autoescape=True)
        )
    if roots_only:
        conditions.append(comments_table.c.parent_id.is_(None))
    conditions.extend(status_conditions(query.status_filter))
    return conditions


def _order_by_id(stmt: Select, direction: SortDirection) -> Select:
    if direction is SortDirection.OLDER:
        return stmt.order_by(comments_table.c.id.desc())
    return stmt.order_by(comments_table.c.id.asc())


def build_find_statement(query: CommentQuery, roots_only: bool) -> Select:
    """Filtered, sorted, paginated select over the fixed column list."""
    stmt = select(*COMMENT_COLUMNS).where(*filter_conditions(query, roots_only))
    stmt = _order_by_id(stmt, query.direction)
    if query.offset:
        stmt = stmt.offset(query.offset)
    if query.is_limited:
        stmt = stmt.limit(query.limit)
    return stmt


def build_count_roots_statement(query: CommentQuery) -> Select:
    """Count of matching roots with the same predicates, no pagination."""
    return (
        select(func.count())
        .select_from(comments_table)
        .where(*filter_conditions(query, roots_only=True))
    )


def build_children_statement(
    page_id: PageId,
    parent_ids: Collection[CommentId],
    status_filter: StatusFilter,
    direction: SortDirection,
) -> Select:
    """Select replies to any comment of a frontier."""
    stmt = select(*COMMENT_COLUMNS).where(
        comments_table.c.parent_id.in_(list(parent_ids))
    )
    if page_id:
        stmt = stmt.where(comments_table.c.page_id == page_id)
    stmt = stmt.where(*status_conditions(status_filter))
    return _order_by_id(stmt, direction)


class SqlCommentRepository(CommentRepository):
    """SQLAlchemy implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(*COMMENT_COLUMNS).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find(self, query: CommentQuery, roots_only: bool) -> List[Comment]:
        """Find comments matching the query filters, sorted and paginated."""
        result = await self.session.execute(build_find_statement(query, roots_only))
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_roots(self, query: CommentQuery) -> int:
        """Count root comments matching the query filters."""
        result = await self.session.execute(build_count_roots_statement(query))
        return result.scalar() or 0

    async def find_children(
        self,
        page_id: PageId,
        parent_ids: Collection[CommentId],
        status_filter: StatusFilter,
        direction: SortDirection,
    ) -> List[Comment]:
        """Find direct replies to any of the given comments."""
        if not parent_ids:
            return []
        stmt = build_children_statement(page_id, parent_ids, status_filter, direction)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict: Dict[str, Any] = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the enclosed writes inside a savepoint."""
        async with self.session.begin_nested():
            yield

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0
