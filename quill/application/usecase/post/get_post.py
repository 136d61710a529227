"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostService
from quill.domain.value import PostSlug

from .models import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving a single post by slug."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> Optional[PostItem]:
        """Execute get post flow.

        Returns:
            Post details if found, None otherwise

        Raises:
            UpstreamError: If the content source fails
        """
        post = await self.post_service.get_post_by_slug(PostSlug(request.slug))
        if not post:
            return None
        return PostItem.from_post(post)
