"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .models import CommentItem
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
