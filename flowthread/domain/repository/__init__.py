"""Repository interfaces for the FlowThread domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from flowthread.domain.repository.comment import CommentRepository

__all__ = [
    "CommentRepository",
]
