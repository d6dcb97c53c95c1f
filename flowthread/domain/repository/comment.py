"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Collection, List, Optional

from flowthread.domain.model.comment import Comment
from flowthread.domain.value import (
    CommentId,
    CommentQuery,
    PageId,
    SortDirection,
    StatusFilter,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the storage round-trips the query engine and the eraser need.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(self, query: CommentQuery, roots_only: bool) -> List[Comment]:
        """Find comments matching the query filters, sorted and paginated.

        Applies the page, author, keyword and status filters of the query,
        the keyword as a ``LIKE`` substring match (case sensitivity follows
        the backend collation),
        orders by id in the query's direction and applies offset/limit.

        Args:
            query: Filter and pagination options
            roots_only: Restrict to comments without a parent

        Returns:
            Matching comments in sort order
        """
        pass

    @abstractmethod
    async def count_roots(self, query: CommentQuery) -> int:
        """Count root comments matching the query filters.

        Uses the same predicates as ``find(query, roots_only=True)`` but
        ignores offset and limit.

        Args:
            query: Filter options

        Returns:
            Number of matching root comments
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        page_id: PageId,
        parent_ids: Collection[CommentId],
        status_filter: StatusFilter,
        direction: SortDirection,
    ) -> List[Comment]:
        """Find direct replies to any of the given comments.

        Args:
            page_id: Page the replies belong to (0 = any page)
            parent_ids: Identifiers of the parent comments
            status_filter: Status filter applied to the replies
            direction: Sort direction by id

        Returns:
            Replies in sort order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    def atomic(self) -> AsyncContextManager[None]:
        """Group writes so that they all apply or none do.

        Usage:
            async with repository.atomic():
                await repository.delete(a)
                await repository.delete(b)
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment row (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a row was removed, False if it was already gone
        """
        pass
