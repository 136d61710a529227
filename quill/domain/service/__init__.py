"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .post_query import PostQueryEngine
from .post_service import PostService

__all__ = [
    "CommentService",
    "PostQueryEngine",
    "PostService",
    "Service",
]
