"""Unit tests for PostQueryEngine."""

from datetime import datetime, timezone

import pytest

from quill.domain.service import PostQueryEngine
from quill.domain.service.post_query import collation_key, parse_timestamp
from quill.domain.value import PostSortField, SortOrder
from quill.domain.value.query import PostQuery
from tests.conftest import make_post

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

POSTS = [
    make_post(
        "a",
        title="Banana bread",
        author="Zoe",
        date="2024-01-15T10:00:00Z",
        content="Ripe fruit works best.",
    ),
    make_post(
        "b",
        title="apple pie",
        author="émile",
        date="2024-01-16T00:00:00Z",
        content="A classic.",
    ),
    make_post(
        "c",
        title="Cherry tart",
        author="Bob",
        date="2023-12-31T23:59:59Z",
        content="Pairs with BANANA ice cream.",
    ),
    make_post("d", title="Untitled draft", author=None, date=None, content=None),
]


@pytest.fixture
def engine():
    return PostQueryEngine()


def slugs(result):
    return [post.slug for post in result.results]


class TestSearch:
    """Free-text search over title, content and author."""

    def test_search_matches_title_and_content_case_insensitively(self, engine):
        result = engine.query(POSTS, PostQuery(search="banana"), now=NOW)

        assert sorted(slugs(result)) == ["a", "c"]
        assert result.total == 2

    def test_search_matches_author(self, engine):
        result = engine.query(POSTS, PostQuery(search="bob"), now=NOW)

        assert slugs(result) == ["c"]

    def test_search_tolerates_missing_fields(self, engine):
        result = engine.query(POSTS, PostQuery(search="draft"), now=NOW)

        assert slugs(result) == ["d"]


class TestAuthorFilter:
    """Exact, case-insensitive author filter."""

    def test_exact_match_only(self, engine):
        assert slugs(engine.query(POSTS, PostQuery(author="zoe"), now=NOW)) == ["a"]
        assert slugs(engine.query(POSTS, PostQuery(author="Zo"), now=NOW)) == []

    def test_post_without_author_never_matches(self, engine):
        result = engine.query(POSTS, PostQuery(author="None"), now=NOW)

        assert result.total == 0


class TestDateRange:
    """Inclusive, day-granular date range."""

    def test_start_and_end_are_inclusive_days(self, engine):
        result = engine.query(
            POSTS,
            PostQuery(start_date="2024-01-15", end_date="2024-01-16"),
            now=NOW,
        )

        assert sorted(slugs(result)) == ["a", "b"]

    def test_end_date_covers_whole_day(self, engine):
        result = engine.query(POSTS, PostQuery(end_date="2023-12-31"), now=NOW)

        assert slugs(result) == ["c"]

    def test_start_only(self, engine):
        result = engine.query(POSTS, PostQuery(start_date="2024-01-16"), now=NOW)

        assert slugs(result) == ["b"]

    def test_posts_without_date_excluded(self, engine):
        result = engine.query(POSTS, PostQuery(start_date="2000-01-01"), now=NOW)

        assert "d" not in slugs(result)
        assert result.total == 3

    def test_unparsable_filter_matches_nothing(self, engine):
        result = engine.query(POSTS, PostQuery(start_date="not-a-date"), now=NOW)

        assert result.results == []
        assert result.total == 0


class TestSorting:
    """Sorting by date, title and author."""

    def test_default_is_date_newest_first(self, engine):
        result = engine.query(POSTS[:3], PostQuery(), now=NOW)

        assert slugs(result) == ["b", "a", "c"]

    def test_date_ascending(self, engine):
        result = engine.query(
            POSTS[:3],
            PostQuery(sort_field=PostSortField.DATE, sort_order=SortOrder.ASC),
            now=NOW,
        )

        assert slugs(result) == ["c", "a", "b"]

    def test_missing_date_sorts_as_now(self, engine):
        result = engine.query(POSTS, PostQuery(), now=NOW)

        assert slugs(result)[0] == "d"

    def test_title_ascending_ignores_case(self, engine):
        result = engine.query(
            POSTS,
            PostQuery(sort_field=PostSortField.TITLE, sort_order=SortOrder.ASC),
            now=NOW,
        )

        assert slugs(result) == ["b", "a", "c", "d"]

    def test_author_descending_folds_accents(self, engine):
        result = engine.query(
            POSTS[:3],
            PostQuery(sort_field=PostSortField.AUTHOR, sort_order=SortOrder.DESC),
            now=NOW,
        )

        assert slugs(result) == ["a", "b", "c"]

    def test_filters_and_sort_combine(self, engine):
        result = engine.query(
            POSTS,
            PostQuery(
                search="a",
                start_date="2024-01-01",
                sort_field=PostSortField.TITLE,
                sort_order=SortOrder.DESC,
            ),
            now=NOW,
        )

        assert slugs(result) == ["a", "b"]

    def test_input_not_mutated(self, engine):
        posts = list(POSTS)

        engine.query(
            posts,
            PostQuery(sort_field=PostSortField.TITLE, sort_order=SortOrder.ASC),
            now=NOW,
        )

        assert posts == POSTS


class TestParsing:
    """Sort and order parsing plus timestamp helpers."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("title", PostSortField.TITLE),
            ("author", PostSortField.AUTHOR),
            ("date", PostSortField.DATE),
            ("views", PostSortField.DATE),
            (None, PostSortField.DATE),
        ],
    )
    def test_sort_field(self, raw, expected):
        assert PostSortField.parse(raw) is expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("asc", SortOrder.ASC), ("desc", SortOrder.DESC), ("up", SortOrder.DESC)],
    )
    def test_sort_order(self, raw, expected):
        assert SortOrder.parse(raw) is expected

    def test_naive_timestamp_treated_as_utc(self):
        assert parse_timestamp("2024-01-15T10:00:00") == datetime(
            2024, 1, 15, 10, 0, tzinfo=timezone.utc
        )

    def test_garbage_timestamp(self):
        assert parse_timestamp("yesterday") is None
        assert parse_timestamp(None) is None

    def test_collation_key_orders_accented_names(self):
        names = ["Frank", "émile", "Edgar"]

        assert sorted(names, key=collation_key) == ["Edgar", "émile", "Frank"]


class TestAuthorScenario:
    """Filtering a mixed list down to one author."""

    def test_only_bob(self, engine):
        posts = [
            make_post("b", author="Bob", title="By Bob"),
            make_post("a", author="Alice", title="By Alice"),
        ]

        result = engine.query(posts, PostQuery(author="bob"), now=NOW)

        assert slugs(result) == ["b"]
        assert result.total == 1

    def test_default_date_order_non_increasing(self, engine):
        result = engine.query(POSTS, PostQuery(), now=NOW)

        instants = [parse_timestamp(p.date) or NOW for p in result.results]
        assert instants == sorted(instants, reverse=True)
