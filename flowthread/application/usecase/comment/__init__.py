"""Comment use cases."""

from .get_page_comments import (
    CommentItem,
    GetPageCommentsRequest,
    GetPageCommentsResponse,
    GetPageCommentsUseCase,
)
from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase

__all__ = [
    "CommentItem",
    "GetPageCommentsRequest",
    "GetPageCommentsResponse",
    "GetPageCommentsUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
]
