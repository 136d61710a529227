"""Post domain service."""

import logfire

from quill.domain.model.post import Post
from quill.domain.repository import PostRepository
from quill.domain.value import PostSlug
from quill.domain.value.query import PostQuery, PostQueryResult

from .base import Service
from .post_query import PostQueryEngine


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, query_engine: PostQueryEngine
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository (content source)
            query_engine: Engine used to filter and sort listings
        """
        self.post_repository = post_repository
        self.query_engine = query_engine

    async def list_posts(self, query: PostQuery) -> PostQueryResult:
        """Fetch all posts and apply a query to them.

        Args:
            query: Filters and sort to apply

        Returns:
            Matching posts in sort order

        Raises:
            UpstreamError: If the content source fails
        """
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts fetched from content source", count=len(posts))
            return self.query_engine.query(posts, query)

    async def get_post_by_slug(self, slug: PostSlug) -> Post | None:
        """Get a post by slug.

        Args:
            slug: Post slug

        Returns:
            Post if found, None otherwise

        Raises:
            UpstreamError: If the content source fails
        """
        with logfire.span("post_service.get_post_by_slug", slug=slug):
            post = await self.post_repository.find_by_slug(slug)

            if post:
                logfire.info("Post found by slug", slug=slug, title=post.title)
            else:
                logfire.warn("Post not found by slug", slug=slug)

            return post
