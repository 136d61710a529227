"""In-memory post repository."""

from collections.abc import Iterable
from typing import Optional

from quill.domain.model.post import Post
from quill.domain.repository.post import PostRepository
from quill.domain.value import PostSlug


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository.

    Stands in for the content management system in tests and local runs.
    """

    def __init__(self, posts: Iterable[Post] = ()) -> None:
        self._posts: dict[PostSlug, Post] = {post.slug: post for post in posts}

    async def find_all(self) -> list[Post]:
        """Return every stored post in insertion order."""
        return list(self._posts.values())

    async def find_by_slug(self, slug: PostSlug) -> Optional[Post]:
        """Find a post by slug."""
        return self._posts.get(slug)
