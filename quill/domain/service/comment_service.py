"""Comment domain service."""

from datetime import datetime, timezone

import logfire

from quill.domain.error import NotFoundError, ValidationError
from quill.domain.model.comment import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, PostSlug
from quill.util.locking import KeyedLock

from .base import Service


def _utcnow() -> datetime:
    """Current UTC time truncated to milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _require(value: str, message: str) -> None:
    if not value:
        raise ValidationError(message)


class CommentService(Service):
    """Domain service for comment operations.

    Every mutation runs while holding the post slug's lock, so at most one
    create/update/delete per slug is in flight at a time.
    """

    def __init__(
        self, comment_repository: CommentRepository, comment_locks: KeyedLock
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_locks: Application-wide per-slug locks
        """
        self.comment_repository = comment_repository
        self.comment_locks = comment_locks

    async def list_comments(self, post_slug: PostSlug) -> list[Comment]:
        """Get all comments for a post, newest first.

        Args:
            post_slug: Post slug

        Returns:
            List of comments (empty if the post has none)

        Raises:
            ValidationError: If post_slug is empty
        """
        _require(post_slug, "Post slug is required")

        with logfire.span("comment_service.list_comments", post_slug=post_slug):
            comments = await self.comment_repository.find_by_post(post_slug)
            logfire.info(
                "Comments retrieved for post", post_slug=post_slug, count=len(comments)
            )
            return comments

    async def create_comment(
        self, post_slug: PostSlug, author: str, content: str
    ) -> Comment:
        """Create a comment at the head of a post's list.

        Args:
            post_slug: Post slug
            author: Display name of the commenter
            content: Comment text

        Returns:
            Created comment

        Raises:
            ValidationError: If any argument is empty
        """
        _require(post_slug, "Post slug is required")
        _require(author, "Author is required")
        _require(content, "Content is required")

        with logfire.span("comment_service.create_comment", post_slug=post_slug):
            async with self.comment_locks.hold(post_slug):
                now = _utcnow()
                comment = Comment(
                    id=await self._next_id(post_slug, now),
                    post_slug=post_slug,
                    author=author,
                    content=content,
                    created_at=now,
                )
                saved = await self.comment_repository.add(comment)

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_slug=post_slug,
                author=author,
            )
            return saved

    async def update_comment(
        self,
        post_slug: PostSlug,
        comment_id: CommentId,
        author: str,
        content: str,
    ) -> Comment:
        """Replace a comment's author and content.

        The comment keeps its ID, creation time and position in the list.

        Args:
            post_slug: Post slug
            comment_id: Comment ID
            author: New author
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If any argument is empty
            NotFoundError: If the post has no comments or the comment doesn't exist
        """
        _require(post_slug, "Post slug is required")
        _require(comment_id, "Comment ID is required")
        _require(author, "Author is required")
        _require(content, "Content is required")

        with logfire.span(
            "comment_service.update_comment",
            post_slug=post_slug,
            comment_id=comment_id,
        ):
            async with self.comment_locks.hold(post_slug):
                if not await self.comment_repository.has_post(post_slug):
                    logfire.warn("No comments for post", post_slug=post_slug)
                    raise NotFoundError("Post", post_slug)

                existing = await self.comment_repository.find_by_id(
                    post_slug, comment_id
                )
                if existing is None:
                    logfire.warn(
                        "Comment not found for update",
                        post_slug=post_slug,
                        comment_id=comment_id,
                    )
                    raise NotFoundError("Comment", comment_id)

                updated = existing.model_copy(
                    update={
                        "author": author,
                        "content": content,
                        "updated_at": max(_utcnow(), existing.created_at),
                    }
                )
                saved = await self.comment_repository.replace(updated)

            if saved is None:
                raise NotFoundError("Comment", comment_id)

            logfire.info(
                "Comment updated", comment_id=comment_id, post_slug=post_slug
            )
            return saved

    async def delete_comment(self, post_slug: PostSlug, comment_id: CommentId) -> None:
        """Delete a comment. Deleting a missing comment is a no-op.

        Args:
            post_slug: Post slug
            comment_id: Comment ID

        Raises:
            ValidationError: If any argument is empty
        """
        _require(post_slug, "Post slug is required")
        _require(comment_id, "Comment ID is required")

        with logfire.span(
            "comment_service.delete_comment",
            post_slug=post_slug,
            comment_id=comment_id,
        ):
            async with self.comment_locks.hold(post_slug):
                removed = await self.comment_repository.delete(post_slug, comment_id)

            if removed:
                logfire.info(
                    "Comment deleted", comment_id=comment_id, post_slug=post_slug
                )
            else:
                logfire.info(
                    "Comment already absent", comment_id=comment_id, post_slug=post_slug
                )

    async def _next_id(self, post_slug: PostSlug, now: datetime) -> CommentId:
        """Time-derived comment ID, unique and increasing within the post.

        Uses epoch milliseconds, bumped past the newest existing ID when two
        comments land in the same millisecond. Caller must hold the slug lock.
        """
        candidate = int(now.timestamp() * 1000)
        comments = await self.comment_repository.find_by_post(post_slug)
        latest = max((int(c.id) for c in comments if c.id.isdigit()), default=0)
        return CommentId(str(max(candidate, latest + 1)))
