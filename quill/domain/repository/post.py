"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.post import Post
from quill.domain.value import PostSlug


class PostRepository(ABC):
    """Read-only source of posts.

    Posts live in an external content management system; implementations
    adapt that system to this contract.
    """

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Fetch every published post.

        Returns:
            All posts, in whatever order the source provides

        Raises:
            UpstreamError: If the content source is unavailable or malformed
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: PostSlug) -> Optional[Post]:
        """Find a post by slug.

        Args:
            slug: The post's unique slug

        Returns:
            The post if found, None otherwise

        Raises:
            UpstreamError: If the content source is unavailable or malformed
        """
        pass
