"""Comment entity.

Comments are user-submitted notes attached to a post by its slug. The slug is
not checked against the content source.
"""

from datetime import datetime
from typing import Optional

from quill.domain.model.common import DomainModel
from quill.domain.value import CommentId, PostSlug


class Comment(DomainModel):
    """Comment entity.

    Business rules:
    - id is unique within the comments of one post slug
    - created_at never changes after creation
    - updated_at is None until the first edit and never precedes created_at
    """

    id: CommentId
    post_slug: PostSlug
    author: str
    content: str
    created_at: datetime
    updated_at: Optional[datetime] = None
