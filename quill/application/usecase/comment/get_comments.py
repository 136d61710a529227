"""Get comments use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import CommentService
from quill.domain.value import PostSlug

from .models import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_slug: str


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a post's comments, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentItem]:
        """Execute get comments flow.

        Raises:
            ValidationError: If the post slug is empty
        """
        comments = await self.comment_service.list_comments(
            PostSlug(request.post_slug)
        )
        return [CommentItem.from_comment(comment) for comment in comments]
