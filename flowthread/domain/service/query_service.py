"""Comment query domain service.

Answers filtered, paginated queries over the reply forest of a page, either
as a flat slice of matching rows or as full threads rebuilt under the
matching root comments.
"""

import logfire

from flowthread.domain.model import Comment, CommentQueryResult
from flowthread.domain.repository import CommentRepository
from flowthread.domain.value import (
    CommentId,
    CommentQuery,
    ExpansionPolicy,
    StatusFilter,
)

from .base import Service


class CommentQueryService(Service):
    """Domain service for fetching comments and comment threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        expansion_policy: ExpansionPolicy = ExpansionPolicy.COLLAPSE,
    ) -> None:
        """Initialize comment query service.

        Args:
            comment_repository: Comment repository
            expansion_policy: How the status filter applies to reply levels
        """
        self.comment_repository = comment_repository
        self.expansion_policy = expansion_policy

    async def fetch(self, query: CommentQuery) -> CommentQueryResult:
        """Fetch the comments selected by a query.

        Flat mode runs a single filtered, sorted, paginated query and returns
        the rows as-is. Thread mode selects the matching root comments (with
        pagination), counts every matching root, then expands the replies
        level by level until a level comes back empty.

        Storage errors from any round-trip propagate unchanged.

        Args:
            query: Filter and pagination options

        Returns:
            Result holding the ordered comments and, in thread mode, the
            number of matching roots
        """
        with logfire.span(
            "comment_query.fetch",
            page_id=query.page_id,
            thread_mode=query.thread_mode,
            status_filter=query.status_filter.name,
            offset=query.offset,
            limit=query.limit,
        ):
            result = CommentQueryResult(query=query)

            if not query.thread_mode:
                result.comments = await self.comment_repository.find(
                    query, roots_only=False
                )
                logfire.info("Flat comments fetched", count=len(result))
                return result

            roots = await self.comment_repository.find(query, roots_only=True)
            result.total_count = await self.comment_repository.count_roots(query)

            await self._expand(result, roots)

            logfire.info(
                "Comment threads fetched",
                page_id=query.page_id,
                roots=len(roots),
                total_roots=result.total_count,
                count=len(result),
            )
            return result

    def descendant_filter(self, status_filter: StatusFilter) -> StatusFilter:
        """Status filter used for reply levels under the configured policy."""
        if self.expansion_policy is ExpansionPolicy.INHERIT:
            return status_filter
        return status_filter.collapsed()

    async def _expand(self, result: CommentQueryResult, roots: list[Comment]) -> None:
        """Breadth-first expansion of the reply trees under ``roots``.

        One storage round-trip per tree level. The frontier for the next
        level is exactly the set of ids fetched at the current one.
        """
        query = result.query
        child_filter = self.descendant_filter(query.status_filter)

        arena: dict[CommentId, Comment] = {}
        for root in roots:
            arena[root.id] = root
            result.comments.append(root)

        frontier: list[CommentId] = [root.id for root in roots]
        level = 0
        while frontier:
            level += 1
            with logfire.span(
                "comment_query.expand_level", level=level, frontier=len(frontier)
            ):
                children = await self.comment_repository.find_children(
                    page_id=query.page_id,
                    parent_ids=frontier,
                    status_filter=child_filter,
                    direction=query.direction,
                )

            frontier = []
            for child in children:
                if child.id in arena:
                    logfire.warn(
                        "Comment reached twice during expansion",
                        comment_id=child.id.hex(),
                    )
                    continue

                parent = arena.get(child.parent_id) if child.parent_id else None
                if parent is not None:
                    result.link(child, parent)

                arena[child.id] = child
                result.comments.append(child)
                frontier.append(child.id)

        logfire.debug("Expansion finished", levels=level)
