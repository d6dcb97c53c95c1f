"""Result of a comment fetch.

The result owns the arena of comments fetched by one call: parent links are
resolved against it by identifier, never stored on the comments themselves,
so comments from different fetches cannot reference each other.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from flowthread.domain.model.comment import Comment
from flowthread.domain.value import CommentId, CommentQuery


@dataclass
class CommentQueryResult:
    """Ordered comments produced by ``CommentQueryService.fetch``.

    Attributes:
        query: The query that produced this result
        comments: Comments in fetch order (roots first, then each reply level)
        total_count: Number of roots matching the filter, ignoring pagination.
            Only set in thread mode.
    """

    query: CommentQuery
    comments: list[Comment] = field(default_factory=list)
    total_count: Optional[int] = None
    # child id -> parent instance, filled during thread expansion only
    _parents: dict[CommentId, Comment] = field(default_factory=dict, repr=False)

    def __len__(self) -> int:
        return len(self.comments)

    def __iter__(self) -> Iterator[Comment]:
        return iter(self.comments)

    def link(self, child: Comment, parent: Comment) -> None:
        """Record the resolved parent of a fetched reply."""
        self._parents[child.id] = parent

    def parent_of(self, comment: Comment) -> Optional[Comment]:
        """Resolved parent of a comment, if it was fetched in the same call."""
        return self._parents.get(comment.id)

    def children_of(self, comment: Comment) -> list[Comment]:
        """Fetched replies whose resolved parent is ``comment``."""
        return [c for c in self.comments if self._parents.get(c.id) is comment]

    def roots(self) -> list[Comment]:
        """Comments without a resolved parent, in fetch order."""
        return [c for c in self.comments if c.id not in self._parents]

    def depth_of(self, comment: Comment) -> int:
        """Number of resolved ancestors above a comment."""
        depth = 0
        parent = self._parents.get(comment.id)
        while parent is not None:
            depth += 1
            parent = self._parents.get(parent.id)
        return depth

    def clear(self) -> None:
        """Drop every fetched comment and parent link."""
        self.comments = []
        self._parents = {}
