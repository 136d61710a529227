"""Unit tests for PostService."""

import pytest

from quill.domain.service import PostService
from quill.domain.value import PostSlug, PostSortField, SortOrder
from quill.domain.value.query import PostQuery
from tests.harness import create_env_fixture

# Unit test fixture - sample posts from the mock content source
unit_env = create_env_fixture()


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_default_query_returns_all_newest_first(self, unit_env):
        post_service = await unit_env.get(PostService)

        result = await post_service.list_posts(PostQuery())

        assert result.total == 3
        assert [p.slug for p in result.results] == [
            "async-python",
            "hello-world",
            "zen-of-editing",
        ]

    @pytest.mark.asyncio
    async def test_author_filter_ignores_case(self, unit_env):
        post_service = await unit_env.get(PostService)

        result = await post_service.list_posts(
            PostQuery(
                author="ADA LOVELACE",
                sort_field=PostSortField.DATE,
                sort_order=SortOrder.ASC,
            )
        )

        assert [p.slug for p in result.results] == ["zen-of-editing", "hello-world"]
        assert result.total == 2


class TestGetPostBySlug:
    """Tests for get_post_by_slug method."""

    @pytest.mark.asyncio
    async def test_existing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        post = await post_service.get_post_by_slug(PostSlug("hello-world"))

        assert post is not None
        assert post.title == "Hello World"

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_slug(PostSlug("nope")) is None
