"""Post query value objects."""

from typing import Optional

from quill.domain.model.post import Post
from quill.domain.value.common import ValueObject
from quill.domain.value.types import PostSortField, SortOrder


class PostQuery(ValueObject):
    """Filter and sort specification for a post listing.

    Date bounds are the raw strings sent by the client. They are parsed by
    the query engine so a malformed bound degrades to "no match" instead of
    failing the request.
    """

    search: Optional[str] = None
    author: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    sort_field: PostSortField = PostSortField.DATE
    sort_order: SortOrder = SortOrder.DESC


class PostQueryResult(ValueObject):
    """Filtered and sorted posts."""

    results: list[Post]
    total: int
