"""Unit tests for the comment use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from quill.application.usecase.comment.models import CommentItem
from quill.domain.error import NotFoundError
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCommentUseCases:
    """Create, read, update and delete through the use case layer."""

    @pytest.mark.asyncio
    async def test_create_then_list(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        created = await create.execute(
            CreateCommentRequest(
                post_slug="hello-world", author="Alice", content="Nice post!"
            )
        )
        listed = await get_comments.execute(
            GetCommentsRequest(post_slug="hello-world")
        )

        assert listed == [created]
        assert created.post_slug == "hello-world"
        assert created.updated_at is None

    @pytest.mark.asyncio
    async def test_item_serializes_camel_case(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)

        created = await create.execute(
            CreateCommentRequest(post_slug="hello-world", author="A", content="C")
        )
        data = created.model_dump(by_alias=True, exclude_none=True)

        assert set(data) == {"id", "postSlug", "author", "content", "createdAt"}

    @pytest.mark.asyncio
    async def test_update(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        created = await create.execute(
            CreateCommentRequest(post_slug="hello-world", author="A", content="C")
        )

        updated = await update.execute(
            UpdateCommentRequest(
                comment_id=created.id,
                post_slug="hello-world",
                author="B",
                content="D",
            )
        )

        assert updated.id == created.id
        assert (updated.author, updated.content) == ("B", "D")
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises(self, unit_env):
        update = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateCommentRequest(
                    comment_id="1", post_slug="hello-world", author="B", content="D"
                )
            )

    @pytest.mark.asyncio
    async def test_delete_reports_success_even_when_absent(self, unit_env):
        delete = await unit_env.get(DeleteCommentUseCase)

        response = await delete.execute(
            DeleteCommentRequest(comment_id="1", post_slug="hello-world")
        )

        assert response.success is True


class TestCommentItemSerialization:
    """Wire format of comment timestamps."""

    def test_timestamps_use_millisecond_precision(self):
        comment = make_comment(
            created_at=datetime(2024, 1, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        ).model_copy(
            update={
                "updated_at": datetime(2024, 1, 2, 8, 30, 5, 7000, tzinfo=timezone.utc)
            }
        )

        data = CommentItem.from_comment(comment).model_dump(mode="json", by_alias=True)

        assert data["createdAt"] == "2024-01-01T12:00:00.123Z"
        assert data["updatedAt"] == "2024-01-02T08:30:05.007Z"

    def test_offset_timestamps_rendered_in_utc(self):
        plus_two = timezone(timedelta(hours=2))
        comment = make_comment(created_at=datetime(2024, 1, 1, 14, 0, tzinfo=plus_two))

        data = CommentItem.from_comment(comment).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )

        assert data["createdAt"] == "2024-01-01T12:00:00.000Z"
        assert "updatedAt" not in data
