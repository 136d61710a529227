"""Comment routes.

Comments are addressed by query parameters (``postSlug``, ``id``) rather than
path segments.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from quill.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from quill.config import Settings
from quill.domain.error import NotFoundError, ValidationError
from quill.interface.error import APIError

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    post_slug: str | None = None
    author: str | None = None
    content: str | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    author: str | None = None
    content: str | None = None


@router.get(
    "", response_model=list[CommentItem], response_model_exclude_none=True
)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    post_slug: str | None = Query(default=None, alias="postSlug"),
) -> list[CommentItem]:
    """Get all comments for a post, newest first.

    Args:
        get_comments_use_case: Get comments use case from DI
        post_slug: Post slug

    Returns:
        List of comments
    """
    if not post_slug:
        raise APIError(status.HTTP_400_BAD_REQUEST, "Post slug is required")

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_slug=post_slug)
        )
    except Exception as e:
        logfire.error("Error fetching comments", post_slug=post_slug, error=str(e))
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch comments"
        )


@router.post(
    "",
    response_model=CommentItem,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Create a comment on a post.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment
    """
    if not request.post_slug or not request.author or not request.content:
        raise APIError(status.HTTP_400_BAD_REQUEST, "Missing required fields")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_slug=request.post_slug,
                author=request.author,
                content=request.content,
            )
        )
    except ValidationError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        logfire.error("Error creating comment", error=str(e))
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create comment"
        )


@router.put("", response_model=CommentItem, response_model_exclude_none=True)
async def update_comment(
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    settings: FromDishka[Settings],
    comment_id: str | None = Query(default=None, alias="id"),
    post_slug: str | None = Query(default=None, alias="postSlug"),
) -> CommentItem:
    """Update a comment's author and content.

    A missing comment is reported as a generic 500 failure unless
    ``API__STRICT_NOT_FOUND`` is enabled, in which case it is a 404.

    Args:
        request: Update data (author and content)
        update_comment_use_case: Update comment use case from DI
        settings: Application settings from DI
        comment_id: Comment ID
        post_slug: Post slug

    Returns:
        Updated comment
    """
    if not comment_id or not post_slug:
        raise APIError(
            status.HTTP_400_BAD_REQUEST, "Comment ID and post slug are required"
        )
    if not request.author or not request.content:
        raise APIError(status.HTTP_400_BAD_REQUEST, "Missing required fields")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                post_slug=post_slug,
                author=request.author,
                content=request.content,
            )
        )
    except NotFoundError as e:
        logfire.warn(
            "Comment update target not found",
            post_slug=post_slug,
            comment_id=comment_id,
            error=str(e),
        )
        if settings.api.strict_not_found:
            raise APIError(
                status.HTTP_404_NOT_FOUND,
                f"{e.resource} not found",
                details=e.identifier,
            )
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update comment"
        )
    except ValidationError as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        logfire.error("Error updating comment", error=str(e))
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update comment"
        )


@router.delete("", response_model=DeleteCommentResponse)
async def delete_comment(
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    comment_id: str | None = Query(default=None, alias="id"),
    post_slug: str | None = Query(default=None, alias="postSlug"),
) -> DeleteCommentResponse:
    """Delete a comment. Deleting a comment that doesn't exist succeeds.

    Args:
        delete_comment_use_case: Delete comment use case from DI
        comment_id: Comment ID
        post_slug: Post slug

    Returns:
        ``{"success": true}``
    """
    if not comment_id or not post_slug:
        raise APIError(
            status.HTTP_400_BAD_REQUEST, "Comment ID and post slug are required"
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, post_slug=post_slug)
        )
    except Exception as e:
        logfire.error("Error deleting comment", error=str(e))
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete comment"
        )
