"""Repository implementations.

Comments only have an in-memory implementation; posts are served by the
Contentful adapter in production.
"""

from quill.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
]
