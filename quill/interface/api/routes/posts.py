"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from quill.adapter.error import UpstreamError
from quill.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
)
from quill.interface.error import APIError

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    search: str | None = None,
    author: str | None = None,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    sort: str | None = None,
    order: str | None = None,
) -> ListPostsResponse:
    """List posts with search, filters and sorting.

    Args:
        list_posts_use_case: List posts use case from DI
        search: Case-insensitive term matched against title, content and author
        author: Case-insensitive exact author name
        start_date: Earliest publication day (inclusive)
        end_date: Latest publication day (inclusive)
        sort: Sort field (date, title or author; defaults to date)
        order: Sort order (asc or desc; defaults to desc)

    Returns:
        Matching posts and listing metadata
    """
    request = ListPostsRequest(
        search=search,
        author=author,
        start_date=start_date,
        end_date=end_date,
        sort=sort,
        order=order,
    )

    try:
        return await list_posts_use_case.execute(request)
    except UpstreamError as e:
        logfire.error("Content source failure listing posts", error=str(e))
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch posts",
            details=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch posts")


@router.get("/{slug}", response_model=PostItem)
async def get_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a post by slug.

    Args:
        slug: Post slug
        get_post_use_case: Get post use case from DI

    Returns:
        Post details

    Raises:
        APIError: If the post is not found or the content source fails
    """
    try:
        post = await get_post_use_case.execute(GetPostRequest(slug=slug))
    except UpstreamError as e:
        logfire.error("Content source failure fetching post", slug=slug, error=str(e))
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch post",
            details=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error fetching post", slug=slug, error=str(e))
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch post")

    if not post:
        logfire.warn("Post not found", slug=slug)
        raise APIError(status.HTTP_404_NOT_FOUND, "Post not found")

    return post
