"""Domain model entities for FlowThread."""

from flowthread.domain.model.comment import Comment
from flowthread.domain.model.result import CommentQueryResult

__all__ = [
    "Comment",
    "CommentQueryResult",
]
