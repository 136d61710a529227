"""Post response models shared by the post use cases."""

from pydantic import BaseModel

from quill.domain.model.post import Post


class PostItem(BaseModel):
    """Post as returned to API clients."""

    title: str | None
    slug: str
    author: str | None
    date: str | None
    content: str | None

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            title=post.title,
            slug=post.slug,
            author=post.author,
            date=post.date,
            content=post.content,
        )
