"""Get page comments use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from flowthread.config import CommentSettings
from flowthread.domain.model import Comment, CommentQueryResult
from flowthread.domain.service import CommentQueryService
from flowthread.domain.value import (
    CommentQuery,
    CommentStatus,
    PageId,
    SortDirection,
    StatusFilter,
)


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str  # Hex-encoded binary id
    page_id: int
    parent_id: str | None
    # None when the parent was not part of the same response
    resolved_parent_id: str | None
    depth: int
    author: str
    text: str
    status: CommentStatus
    report_count: int
    created_at: datetime

    @classmethod
    def from_result(
        cls, comment: Comment, result: CommentQueryResult
    ) -> "CommentItem":
        """Convert a fetched comment, resolving its parent within the result."""
        parent = result.parent_of(comment)
        return cls(
            comment_id=comment.id.hex(),
            page_id=comment.page_id,
            parent_id=comment.parent_id.hex() if comment.parent_id else None,
            resolved_parent_id=parent.id.hex() if parent else None,
            depth=result.depth_of(comment),
            author=comment.author.root,
            text=comment.text,
            status=comment.status,
            report_count=comment.report_count,
            created_at=comment.created_at,
        )


def resolve_limit(limit: int | None, settings: CommentSettings) -> int:
    """Apply the configured default and ceiling to a requested page size."""
    if limit is None:
        return settings.default_page_size
    return min(limit, settings.max_page_size)


class GetPageCommentsRequest(BaseModel):
    """Get page comments request."""

    page_id: int = Field(gt=0)
    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)
    direction: SortDirection = SortDirection.OLDER
    status_filter: StatusFilter = StatusFilter.ALL


class GetPageCommentsResponse(BaseModel):
    """Get page comments response."""

    page_id: int
    comments: list[CommentItem]
    # Number of threads matching the filter, independent of offset/limit
    total: int


class GetPageCommentsUseCase:
    """Use case for rendering the comment threads of a page.

    Roots are paginated; every reply under a returned root is included.
    """

    def __init__(
        self,
        query_service: CommentQueryService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get page comments use case.

        Args:
            query_service: Comment query domain service
            comment_settings: Page size configuration
        """
        self.query_service = query_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetPageCommentsRequest) -> GetPageCommentsResponse:
        """Execute get page comments flow.

        Args:
            request: Page id, pagination and filter

        Returns:
            Comments in fetch order (roots, then each reply level) and the
            total number of matching threads
        """
        query = CommentQuery(
            page_id=PageId(request.page_id),
            direction=request.direction,
            offset=request.offset,
            limit=resolve_limit(request.limit, self.comment_settings),
            thread_mode=True,
            status_filter=request.status_filter,
        )
        result = await self.query_service.fetch(query)

        return GetPageCommentsResponse(
            page_id=request.page_id,
            comments=[CommentItem.from_result(c, result) for c in result],
            total=result.total_count or 0,
        )
