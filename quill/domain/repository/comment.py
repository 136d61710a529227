"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.comment import Comment
from quill.domain.value import CommentId, PostSlug


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are stored as one ordered list per post slug, newest first.
    Implementations do not serialize concurrent writers; callers that
    read-modify-write must hold the slug's lock.
    """

    @abstractmethod
    async def find_by_post(self, post_slug: PostSlug) -> List[Comment]:
        """Find all comments for a post, newest first.

        Args:
            post_slug: The post slug

        Returns:
            A copy of the slug's comment list (empty if none exist)
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, post_slug: PostSlug, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID within a post.

        Args:
            post_slug: The post slug
            comment_id: The comment ID

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def has_post(self, post_slug: PostSlug) -> bool:
        """Check whether a comment list has ever been created for a post.

        Args:
            post_slug: The post slug

        Returns:
            True once the first comment for the slug has been added
        """
        pass

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a comment at the head of its post's list.

        Args:
            comment: The comment to add

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def replace(self, comment: Comment) -> Optional[Comment]:
        """Replace an existing comment, keeping its position in the list.

        Args:
            comment: The new version of the comment (matched by post slug and ID)

        Returns:
            The stored comment, or None if no comment with that ID exists
        """
        pass

    @abstractmethod
    async def delete(self, post_slug: PostSlug, comment_id: CommentId) -> bool:
        """Remove a comment.

        Args:
            post_slug: The post slug
            comment_id: The comment ID

        Returns:
            True if a comment was removed, False if it did not exist
        """
        pass
