"""Delete comment use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import CommentService
from quill.domain.value import CommentId, PostSlug


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    post_slug: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool = True


class DeleteCommentUseCase(BaseUseCase):
    """Use case for removing a comment.

    Deleting a comment that does not exist succeeds without changes.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow."""
        await self.comment_service.delete_comment(
            post_slug=PostSlug(request.post_slug),
            comment_id=CommentId(request.comment_id),
        )
        return DeleteCommentResponse(success=True)
