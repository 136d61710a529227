"""Domain model entities for the blog API."""

from quill.domain.model.comment import Comment
from quill.domain.model.post import Post

__all__ = [
    "Comment",
    "Post",
]
