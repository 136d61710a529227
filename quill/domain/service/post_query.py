"""Post query engine.

Filters and sorts an in-memory post collection. The content source has no
query language we rely on, so every listing request fetches all posts and
narrows them here.
"""

import unicodedata
from collections.abc import Callable, Sequence
from datetime import date, datetime, time, timezone

import logfire

from quill.domain.model.post import Post
from quill.domain.value import PostSortField, SortOrder
from quill.domain.value.query import PostQuery, PostQueryResult

from .base import Service

PostPredicate = Callable[[Post], bool]


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp or date, returning None if it is unusable.

    Values without an offset are taken to be UTC.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_day(value: str) -> date | None:
    """Parse the calendar day of an ISO-8601 date or timestamp."""
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def collation_key(value: str | None) -> tuple[str, str]:
    """Locale-aware sort key for display strings.

    Accents and case are ignored at the primary level, so "émile" sorts
    between "Edgar" and "Frank"; the original text breaks ties.
    """
    text = value or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), text


class PostQueryEngine(Service):
    """Domain service that applies a PostQuery to a set of posts."""

    def query(
        self,
        posts: Sequence[Post],
        query: PostQuery,
        now: datetime | None = None,
    ) -> PostQueryResult:
        """Filter and sort posts.

        Never raises for bad filter values: a post that cannot be evaluated
        against a filter is left out of the result. The input is not mutated.

        Args:
            posts: Every candidate post
            query: Filters and sort to apply
            now: Reference instant for posts without a usable date
                (defaults to the current time)

        Returns:
            Matching posts in sort order with their count
        """
        with logfire.span(
            "post_query.query",
            candidates=len(posts),
            search=query.search,
            author=query.author,
            start_date=query.start_date,
            end_date=query.end_date,
            sort_field=query.sort_field.value,
            sort_order=query.sort_order.value,
        ):
            predicates = self._build_predicates(query)
            matches = [post for post in posts if all(p(post) for p in predicates)]

            reference = now or datetime.now(timezone.utc)
            results = self._sort(matches, query, reference)

            logfire.info(
                "Posts queried", candidates=len(posts), matched=len(results)
            )
            return PostQueryResult(results=results, total=len(results))

    def _build_predicates(self, query: PostQuery) -> list[PostPredicate]:
        """Build one predicate per filter present in the query."""
        predicates: list[PostPredicate] = []

        if query.author:
            author = query.author.casefold()
            predicates.append(
                lambda post: post.author is not None
                and post.author.casefold() == author
            )

        if query.start_date or query.end_date:
            predicates.append(self._date_range(query.start_date, query.end_date))

        if query.search:
            term = query.search.casefold()
            predicates.append(
                lambda post: any(
                    term in (field or "").casefold()
                    for field in (post.title, post.content, post.author)
                )
            )

        return predicates

    @staticmethod
    def _date_range(start_date: str | None, end_date: str | None) -> PostPredicate:
        """Inclusive day-granularity range on the post date."""
        start = end = None
        if start_date:
            start_day = parse_day(start_date)
            if start_day is None:
                logfire.warn("Unparsable start date filter", start_date=start_date)
                return lambda post: False
            start = datetime.combine(start_day, time.min, tzinfo=timezone.utc)
        if end_date:
            end_day = parse_day(end_date)
            if end_day is None:
                logfire.warn("Unparsable end date filter", end_date=end_date)
                return lambda post: False
            end = datetime.combine(end_day, time.max, tzinfo=timezone.utc)

        def in_range(post: Post) -> bool:
            published = parse_timestamp(post.date)
            if published is None:
                return False
            if start is not None and published < start:
                return False
            if end is not None and published > end:
                return False
            return True

        return in_range

    @staticmethod
    def _sort(
        posts: list[Post], query: PostQuery, reference: datetime
    ) -> list[Post]:
        """Stable sort on the requested field.

        Posts without a usable date sort as if published at ``reference``.
        """
        if query.sort_field is PostSortField.DATE:

            def key(post: Post):
                return parse_timestamp(post.date) or reference

        else:
            field = query.sort_field.value

            def key(post: Post):
                return collation_key(getattr(post, field))

        return sorted(posts, key=key, reverse=query.sort_order is SortOrder.DESC)
