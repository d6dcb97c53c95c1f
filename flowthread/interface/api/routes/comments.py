"""Comment routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Path, Query

from flowthread.application.usecase.comment import (
    GetPageCommentsRequest,
    GetPageCommentsResponse,
    GetPageCommentsUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from flowthread.domain.value import SortDirection, StatusFilter

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


@router.get("/pages/{page_id}/comments", response_model=GetPageCommentsResponse)
async def get_page_comments(
    page_id: Annotated[int, Path(gt=0)],
    get_page_comments_use_case: FromDishka[GetPageCommentsUseCase],
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int | None, Query(ge=1)] = None,
    direction: Annotated[SortDirection, Query(alias="dir")] = SortDirection.OLDER,
    status_filter: Annotated[StatusFilter, Query(alias="filter")] = StatusFilter.ALL,
) -> GetPageCommentsResponse:
    """Get the comment threads of a page.

    Root comments are paginated by ``offset``/``limit``; each returned root
    comes with every reply below it. ``total`` counts matching threads
    regardless of pagination.

    Args:
        page_id: Page identifier
        get_page_comments_use_case: Use case from DI
        offset: Number of threads to skip
        limit: Maximum number of threads (server default when omitted)
        direction: "older" (newest first) or "newer"
        status_filter: 0=all 1=normal 2=reported 3=deleted 4=spam

    Returns:
        Comments in thread order with the total thread count
    """
    request = GetPageCommentsRequest(
        page_id=page_id,
        offset=offset,
        limit=limit,
        direction=direction,
        status_filter=status_filter,
    )
    return await get_page_comments_use_case.execute(request)


@router.get("/comments", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page_id: Annotated[int, Query(ge=0)] = 0,
    user: str = "",
    keyword: str = "",
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int | None, Query(ge=1)] = None,
    direction: Annotated[SortDirection, Query(alias="dir")] = SortDirection.OLDER,
    status_filter: Annotated[StatusFilter, Query(alias="filter")] = StatusFilter.ALL,
) -> ListCommentsResponse:
    """List comments matching a filter, without thread expansion.

    Used by moderation views: comments by a user, containing a keyword, or
    in a given moderation state, on one page or across all pages.
    """
    request = ListCommentsRequest(
        page_id=page_id,
        author=user,
        keyword=keyword,
        offset=offset,
        limit=limit,
        direction=direction,
        status_filter=status_filter,
    )
    return await list_comments_use_case.execute(request)
