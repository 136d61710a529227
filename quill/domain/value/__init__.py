"""Domain value objects for the blog API."""

from quill.domain.value.identifiers import CommentId, PostSlug
from quill.domain.value.types import PostSortField, SortOrder

__all__ = [
    # Identifiers
    "CommentId",
    "PostSlug",
    # Types
    "PostSortField",
    "SortOrder",
]
