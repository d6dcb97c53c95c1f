"""Page lifecycle use cases."""

from .purge_page_comments import (
    PurgePageCommentsRequest,
    PurgePageCommentsResponse,
    PurgePageCommentsUseCase,
)

__all__ = [
    "PurgePageCommentsRequest",
    "PurgePageCommentsResponse",
    "PurgePageCommentsUseCase",
]
