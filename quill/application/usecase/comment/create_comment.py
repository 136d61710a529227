"""Create comment use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import CommentService
from quill.domain.value import PostSlug

from .models import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_slug: str
    author: str
    content: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for adding a comment to a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If any field is empty
        """
        comment = await self.comment_service.create_comment(
            post_slug=PostSlug(request.post_slug),
            author=request.author,
            content=request.content,
        )
        return CommentItem.from_comment(comment)
