"""Strongly typed identifiers for FlowThread domain entities.

Comment identifiers are 16-byte binary keys: 8 bytes of big-endian
microseconds since the Unix epoch followed by 8 random bytes. Ordering by the
raw bytes therefore approximates creation order, which is what the default
"older"/"newer" sort relies on.
"""

import secrets
from datetime import datetime, timezone
from typing import NewType

CommentId = NewType("CommentId", bytes)
PageId = NewType("PageId", int)

COMMENT_ID_LENGTH = 16

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def new_comment_id(now: datetime | None = None) -> CommentId:
    """Generate a new time-prefixed comment identifier.

    Args:
        now: Creation time (defaults to the current UTC time). Naive values
            are treated as UTC.

    Returns:
        A fresh 16-byte CommentId
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    delta = now - _EPOCH
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    return CommentId(micros.to_bytes(8, "big") + secrets.token_bytes(8))


def comment_id_from_hex(value: str) -> CommentId:
    """Parse a hex-encoded comment identifier.

    Raises:
        ValueError: If the value is not 32 hex characters
    """
    try:
        raw = bytes.fromhex(value)
    except ValueError as e:
        raise ValueError(f"Invalid comment id: {value!r}") from e
    if len(raw) != COMMENT_ID_LENGTH:
        raise ValueError(f"Invalid comment id: {value!r}")
    return CommentId(raw)


def comment_id_to_hex(comment_id: CommentId) -> str:
    """Render a comment identifier as lowercase hex."""
    return comment_id.hex()
