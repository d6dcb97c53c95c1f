"""Domain value objects for FlowThread."""

from flowthread.domain.value.identifiers import (
    COMMENT_ID_LENGTH,
    CommentId,
    PageId,
    comment_id_from_hex,
    comment_id_to_hex,
    new_comment_id,
)
from flowthread.domain.value.types import (
    UNLIMITED,
    Author,
    CommentQuery,
    CommentStatus,
    ExpansionPolicy,
    SortDirection,
    StatusFilter,
)

__all__ = [
    # Identifiers
    "COMMENT_ID_LENGTH",
    "CommentId",
    "PageId",
    "comment_id_from_hex",
    "comment_id_to_hex",
    "new_comment_id",
    # Types
    "UNLIMITED",
    "Author",
    "CommentQuery",
    "CommentStatus",
    "ExpansionPolicy",
    "SortDirection",
    "StatusFilter",
]
