"""Comment response models shared by the comment use cases."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from quill.domain.model.comment import Comment


def format_timestamp(value: datetime) -> str:
    """Render a UTC instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = value.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


class CommentItem(BaseModel):
    """Comment as returned to API clients (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    post_slug: str
    author: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None

    @field_serializer("created_at", "updated_at", when_used="json-unless-none")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=comment.id,
            post_slug=comment.post_slug,
            author=comment.author,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
