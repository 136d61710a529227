"""Update comment use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import CommentService
from quill.domain.value import CommentId, PostSlug

from .models import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    post_slug: str
    author: str
    content: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's author and content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, post slug and new values

        Returns:
            Updated comment

        Raises:
            ValidationError: If any field is empty
            NotFoundError: If the post has no comments or the comment doesn't exist
        """
        comment = await self.comment_service.update_comment(
            post_slug=PostSlug(request.post_slug),
            comment_id=CommentId(request.comment_id),
            author=request.author,
            content=request.content,
        )
        return CommentItem.from_comment(comment)
