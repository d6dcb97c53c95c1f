"""SQL repository implementations."""

from flowthread.persistence.repository.comment import SqlCommentRepository

__all__ = [
    "SqlCommentRepository",
]
