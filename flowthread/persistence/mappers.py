"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import timezone
from typing import Any, Dict

from flowthread.domain.model import Comment
from flowthread.domain.value import Author, CommentId, CommentStatus, PageId


def _to_bytes(value: Any) -> bytes:
    # asyncpg returns bytes, some drivers return memoryview/bytearray
    return bytes(value)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    created_at = row["created_at"]
    if created_at.tzinfo is None:
        # SQLite and MySQL drop the offset; rows are written in UTC
        created_at = created_at.replace(tzinfo=timezone.utc)

    return Comment(
        id=CommentId(_to_bytes(row["id"])),
        page_id=PageId(row["page_id"]),
        parent_id=CommentId(_to_bytes(row["parent_id"]))
        if row.get("parent_id") is not None
        else None,
        author=Author(row["author"]),
        text=row["text"],
        status=CommentStatus(row["status"]),
        report_count=row["report_count"],
        created_at=created_at,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "page_id": comment.page_id,
        "parent_id": comment.parent_id,
        "author": comment.author.root,
        "text": comment.text,
        "status": comment.status.value,
        "report_count": comment.report_count,
        "created_at": comment.created_at,
    }
