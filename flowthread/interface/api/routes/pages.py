"""Page lifecycle routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Path, status

from flowthread.application.usecase.page import (
    PurgePageCommentsRequest,
    PurgePageCommentsResponse,
    PurgePageCommentsUseCase,
)

router = APIRouter(prefix="/pages", tags=["pages"], route_class=DishkaRoute)


@router.delete("/{page_id}/comments", response_model=PurgePageCommentsResponse)
async def purge_page_comments(
    page_id: Annotated[int, Path(gt=0)],
    purge_page_comments_use_case: FromDishka[PurgePageCommentsUseCase],
) -> PurgePageCommentsResponse:
    """Erase every comment of a page that was permanently removed.

    Called by the host when a page is deleted. Returns ``failed: true``
    instead of an error status when the purge could not complete and the
    service is not running in strict mode.

    Args:
        page_id: Page identifier
        purge_page_comments_use_case: Use case from DI

    Returns:
        Number of comments erased
    """
    try:
        request = PurgePageCommentsRequest(page_id=page_id)
        return await purge_page_comments_use_case.execute(request)
    except Exception as e:
        logfire.error("Unexpected error purging page comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to purge page comments",
        )
