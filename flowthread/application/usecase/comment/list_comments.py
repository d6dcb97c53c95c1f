"""List comments use case (moderation listing)."""

from pydantic import BaseModel, Field

from flowthread.config import CommentSettings
from flowthread.domain.service import CommentQueryService
from flowthread.domain.value import CommentQuery, PageId, SortDirection, StatusFilter

from .get_page_comments import CommentItem, resolve_limit


class ListCommentsRequest(BaseModel):
    """List comments request."""

    page_id: int = Field(default=0, ge=0)  # 0 = every page
    author: str = ""
    keyword: str = ""
    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)
    direction: SortDirection = SortDirection.OLDER
    status_filter: StatusFilter = StatusFilter.ALL


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentItem]
    count: int


class ListCommentsUseCase:
    """Use case for a flat, filterable listing of comments.

    Replies are matched like roots and no thread is expanded, which is what
    moderation views (by user, by keyword, by status) need.
    """

    def __init__(
        self,
        query_service: CommentQueryService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            query_service: Comment query domain service
            comment_settings: Page size configuration
        """
        self.query_service = query_service
        self.comment_settings = comment_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Filters and pagination

        Returns:
            Matching comments in sort order, without their threads
        """
        query = CommentQuery(
            page_id=PageId(request.page_id),
            author=request.author,
            keyword=request.keyword,
            direction=request.direction,
            offset=request.offset,
            limit=resolve_limit(request.limit, self.comment_settings),
            thread_mode=False,
            status_filter=request.status_filter,
        )
        result = await self.query_service.fetch(query)

        items = [CommentItem.from_result(c, result) for c in result]
        return ListCommentsResponse(comments=items, count=len(items))
