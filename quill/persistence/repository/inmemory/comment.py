"""In-memory comment repository."""

from typing import Optional

from quill.domain.model.comment import Comment
from quill.domain.repository.comment import CommentRepository
from quill.domain.value import CommentId, PostSlug


class InMemoryCommentRepository(CommentRepository):
    """Process-local implementation of CommentRepository.

    Holds one newest-first list per post slug. Contents are lost when the
    process exits.
    """

    def __init__(self) -> None:
        self._comments: dict[PostSlug, list[Comment]] = {}

    async def find_by_post(self, post_slug: PostSlug) -> list[Comment]:
        """Find all comments for a post, newest first."""
        return list(self._comments.get(post_slug, []))

    async def find_by_id(
        self, post_slug: PostSlug, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID within a post."""
        for comment in self._comments.get(post_slug, []):
            if comment.id == comment_id:
                return comment
        return None

    async def has_post(self, post_slug: PostSlug) -> bool:
        """Check whether the post's comment list exists."""
        return post_slug in self._comments

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment at the head of its post's list."""
        self._comments.setdefault(comment.post_slug, []).insert(0, comment)
        return comment

    async def replace(self, comment: Comment) -> Optional[Comment]:
        """Replace a comment in place."""
        comments = self._comments.get(comment.post_slug, [])
        for index, existing in enumerate(comments):
            if existing.id == comment.id:
                comments[index] = comment
                return comment
        return None

    async def delete(self, post_slug: PostSlug, comment_id: CommentId) -> bool:
        """Remove a comment, keeping the (possibly empty) list."""
        comments = self._comments.get(post_slug)
        if comments is None:
            return False
        remaining = [c for c in comments if c.id != comment_id]
        self._comments[post_slug] = remaining
        return len(remaining) != len(comments)
