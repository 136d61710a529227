"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter and persistence layers.
"""

from quill.domain.repository.comment import CommentRepository
from quill.domain.repository.post import PostRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
]
