"""List posts use case."""

import logfire
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import PostService
from quill.domain.value import PostSortField, SortOrder
from quill.domain.value.query import PostQuery

from .models import PostItem


class ListPostsRequest(BaseModel):
    """List posts request.

    Values are passed through as the client sent them; empty strings mean
    "no filter".
    """

    search: str | None = None
    author: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    sort: str | None = None  # Unknown fields fall back to date
    order: str | None = None  # Anything but "asc" means descending


class AppliedFilters(BaseModel):
    """Filters echoed back in the listing metadata."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    author: str | None
    start_date: str | None
    end_date: str | None
    search: str | None


class AppliedSort(BaseModel):
    """Sort echoed back in the listing metadata."""

    field: PostSortField
    order: SortOrder


class PostListMeta(BaseModel):
    """Listing metadata."""

    total: int
    filters: AppliedFilters
    sort: AppliedSort


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    meta: PostListMeta


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts with search, filters and sorting."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and sort

        Returns:
            Matching posts plus the filters and sort that were applied

        Raises:
            UpstreamError: If the content source fails
        """
        query = PostQuery(
            search=request.search or None,
            author=request.author or None,
            start_date=request.start_date or None,
            end_date=request.end_date or None,
            sort_field=PostSortField.parse(request.sort),
            sort_order=SortOrder.parse(request.order),
        )

        result = await self.post_service.list_posts(query)

        logfire.info("Posts listed", total=result.total)

        return ListPostsResponse(
            posts=[PostItem.from_post(post) for post in result.results],
            meta=PostListMeta(
                total=result.total,
                filters=AppliedFilters(
                    author=query.author,
                    start_date=query.start_date,
                    end_date=query.end_date,
                    search=query.search,
                ),
                sort=AppliedSort(field=query.sort_field, order=query.sort_order),
            ),
        )
