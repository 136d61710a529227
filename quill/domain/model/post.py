"""Post entity.

Posts are owned by the content management system. This service only reads
them, so the model mirrors what the CMS returns and tolerates missing fields.
"""

from typing import Optional

from quill.domain.model.common import DomainModel
from quill.domain.value import PostSlug


class Post(DomainModel):
    """Blog post as served by the content source.

    ``date`` is kept as the raw ISO-8601 string from the CMS; it is parsed
    only where a query needs to compare it.
    """

    slug: PostSlug
    title: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    content: Optional[str] = None
