"""Purge page comments use case."""

import logfire
from pydantic import BaseModel

from flowthread.domain.error import UnscopedPurgeError
from flowthread.domain.service import CommentEraseService, CommentQueryService
from flowthread.domain.value import CommentQuery, PageId


class PurgePageCommentsRequest(BaseModel):
    """Purge page comments request."""

    page_id: int


class PurgePageCommentsResponse(BaseModel):
    """Purge page comments response."""

    page_id: int
    erased: int
    failed: bool = False


class PurgePageCommentsUseCase:
    """Use case run when a page is permanently removed.

    Fetches every comment of the page regardless of tree position and erases
    them all without removal notifications.
    """

    def __init__(
        self,
        query_service: CommentQueryService,
        erase_service: CommentEraseService,
        strict: bool,
    ) -> None:
        """Initialize purge page comments use case.

        Args:
            query_service: Comment query domain service
            erase_service: Comment erase domain service
            strict: Raise storage failures instead of reporting them
        """
        self.query_service = query_service
        self.erase_service = erase_service
        self.strict = strict

    async def execute(
        self, request: PurgePageCommentsRequest
    ) -> PurgePageCommentsResponse:
        """Execute purge flow.

        Steps:
        1. Fetch all comments of the page (flat, unlimited)
        2. Erase them with notifications suppressed

        The erase is all-or-nothing. When not strict, a storage failure is
        logged and reported as ``failed`` so the page removal that triggered
        the purge is not blocked.

        Args:
            request: Page to purge

        Returns:
            Number of comments erased

        Raises:
            UnscopedPurgeError: If the page id is not positive
        """
        if request.page_id < 1:
            raise UnscopedPurgeError(request.page_id)

        with logfire.span("purge_page_comments", page_id=request.page_id):
            try:
                result = await self.query_service.fetch(
                    CommentQuery.for_page_purge(PageId(request.page_id))
                )
                erased = await self.erase_service.erase(result, notify=False)
            except Exception as e:
                logfire.error(
                    "Page comment purge failed",
                    page_id=request.page_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                if self.strict:
                    raise
                return PurgePageCommentsResponse(
                    page_id=request.page_id, erased=0, failed=True
                )

            return PurgePageCommentsResponse(page_id=request.page_id, erased=erased)
