"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

from quill.domain.model import Comment, Post
from quill.domain.value import CommentId, PostSlug

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_post(slug: str, **fields) -> Post:
    """Helper to build a post with only the fields a test cares about."""
    return Post(slug=PostSlug(slug), **fields)


def make_comment(
    comment_id: str = "1700000000000",
    post_slug: str = "hello-world",
    author: str = "Alice",
    content: str = "Nice post!",
    created_at: datetime | None = None,
) -> Comment:
    """Helper to build a comment."""
    return Comment(
        id=CommentId(comment_id),
        post_slug=PostSlug(post_slug),
        author=author,
        content=content,
        created_at=created_at or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Run every test away from any local .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("AUTH__API_KEY", "API__STRICT_NOT_FOUND"):
        monkeypatch.delenv(name, raising=False)
