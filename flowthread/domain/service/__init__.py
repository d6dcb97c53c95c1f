"""Domain services."""

from .base import Service
from .erase_service import CommentEraseService, RemovalNotifier
from .query_service import CommentQueryService

__all__ = [
    "CommentEraseService",
    "CommentQueryService",
    "RemovalNotifier",
    "Service",
]
