"""Domain value objects for FlowThread.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, field_validator, model_validator

from flowthread.domain.value.common import RootValueObject, ValueObject
from flowthread.domain.value.identifiers import PageId


class CommentStatus(int, Enum):
    """Moderation status of a comment.

    Stored as a small integer. "Reported" is not a status: it is a NORMAL
    comment whose report counter is above zero.
    """

    NORMAL = 0
    DELETED = 1
    SPAM = 2


class StatusFilter(int, Enum):
    """Which moderation states a query includes."""

    ALL = 0
    NORMAL = 1
    REPORTED = 2
    DELETED = 3
    SPAM = 4

    def collapsed(self) -> "StatusFilter":
        """Filter applied to reply levels under the legacy expansion policy.

        Descendant levels only distinguish ALL from NORMAL: any filter other
        than ALL keeps NORMAL replies only.
        """
        if self is StatusFilter.ALL:
            return StatusFilter.ALL
        return StatusFilter.NORMAL


class SortDirection(str, Enum):
    """Ordering of comments by identifier."""

    OLDER = "older"  # Descending, newest first
    NEWER = "newer"  # Ascending, oldest first


class ExpansionPolicy(str, Enum):
    """How the status filter applies below the root level in thread mode."""

    # Reply levels honor ALL vs NORMAL only (historical behavior)
    COLLAPSE = "collapse"
    # Reply levels honor the full filter, same as the root level
    INHERIT = "inherit"


class Author(RootValueObject[str]):
    """Comment author: a registered username or an anonymous marker."""

    @field_validator("root")
    @classmethod
    def validate_author(cls, v: str) -> str:
        """Validate author is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Author must be 1-255 characters")
        return v


UNLIMITED = -1


class CommentQuery(ValueObject):
    """Filter and pagination options for a comment fetch.

    Every field is optional; the defaults select every comment on every page
    as a threaded forest, newest first.
    """

    page_id: PageId = Field(default=PageId(0), ge=0)  # 0 = any page
    author: str = ""  # Exact match, "" = any author
    keyword: str = ""  # Substring of text, "" = no keyword
    direction: SortDirection = SortDirection.OLDER
    offset: int = Field(default=0, ge=0)
    limit: int = UNLIMITED
    thread_mode: bool = True
    status_filter: StatusFilter = StatusFilter.ALL

    @model_validator(mode="after")
    def validate_limit(self) -> "CommentQuery":
        """Limit is either -1 (unlimited) or a positive row count."""
        if self.limit != UNLIMITED and self.limit < 1:
            raise ValueError("Limit must be -1 (unlimited) or a positive integer")
        return self

    @property
    def is_limited(self) -> bool:
        """Whether the query carries a row limit."""
        return self.limit != UNLIMITED

    @classmethod
    def for_page_purge(cls, page_id: PageId) -> "CommentQuery":
        """Query selecting every comment of a page regardless of tree position."""
        return cls(
            page_id=page_id,
            limit=UNLIMITED,
            thread_mode=False,
            status_filter=StatusFilter.ALL,
        )
