"""Contentful content source adapter.

Reads blog posts from the Contentful Content Delivery API.
"""

from typing import Any, Optional

import httpx
import logfire

from quill.adapter.error import UpstreamError
from quill.domain.model.post import Post
from quill.domain.repository.post import PostRepository
from quill.domain.value import PostSlug


def plain_text(value: Any) -> Optional[str]:
    """Flatten a Contentful field to plain text.

    Short/long text fields are returned unchanged. Rich text documents are
    reduced to their text nodes, one line per top-level block.
    """
    if value is None or isinstance(value, str):
        return value
    if not isinstance(value, dict):
        return str(value)
    if value.get("nodeType") == "text":
        return value.get("value", "")

    children = [plain_text(child) or "" for child in value.get("content", [])]
    separator = "\n" if value.get("nodeType") == "document" else ""
    return separator.join(children)


class ContentfulPostRepository(PostRepository):
    """PostRepository backed by a Contentful space."""

    def __init__(
        self,
        space_id: str,
        access_token: str,
        environment: str = "master",
        content_type: str = "blogPost",
        base_url: str = "https://cdn.contentful.com",
        page_size: int = 100,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Contentful client.

        Args:
            space_id: Contentful space ID
            access_token: Content Delivery API access token
            environment: Contentful environment
            content_type: Content type ID of blog post entries
            base_url: Content Delivery API base URL
            page_size: Entries requested per page when listing
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.access_token = access_token
        self.content_type = content_type
        self.page_size = page_size
        self.timeout = timeout
        self._transport = transport

        self.entries_url = (
            f"{base_url.rstrip('/')}/spaces/{space_id}"
            f"/environments/{environment}/entries"
        )

    async def find_all(self) -> list[Post]:
        """Fetch every blog post, newest first, paging through the space."""
        posts: list[Post] = []
        skip = 0

        async with self._client() as client:
            while True:
                payload = await self._get_entries(
                    client,
                    {
                        "content_type": self.content_type,
                        "order": "-fields.date",
                        "limit": self.page_size,
                        "skip": skip,
                    },
                )
                items = payload["items"]
                posts.extend(self._to_posts(items))
                skip += len(items)
                if not items or skip >= payload.get("total", 0):
                    break

        logfire.info("Contentful posts fetched", count=len(posts))
        return posts

    async def find_by_slug(self, slug: PostSlug) -> Optional[Post]:
        """Fetch the post with the given slug."""
        async with self._client() as client:
            payload = await self._get_entries(
                client,
                {
                    "content_type": self.content_type,
                    "fields.slug": slug,
                    "limit": 1,
                },
            )

        posts = self._to_posts(payload["items"])
        return posts[0] if posts else None

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self.timeout,
            headers={"Authorization": f"Bearer {self.access_token}"},
        )

    async def _get_entries(
        self, client: httpx.AsyncClient, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Request one page of entries.

        Raises:
            UpstreamError: On transport failure, non-200 status or a malformed body
        """
        try:
            response = await client.get(self.entries_url, params=params)
        except httpx.HTTPError as e:
            logfire.error("Contentful request failed", error=str(e))
            raise UpstreamError(f"Content source unreachable: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Contentful returned an error",
                status_code=response.status_code,
                error=response.text,
            )
            raise UpstreamError(
                f"Content source returned status {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError("Content source returned invalid JSON") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
            raise UpstreamError("Content source returned an unexpected payload")

        return payload

    @staticmethod
    def _to_posts(items: list[Any]) -> list[Post]:
        """Map entries to posts, skipping entries without a slug."""
        posts = []
        for item in items:
            fields = item.get("fields", {}) if isinstance(item, dict) else {}
            slug = fields.get("slug")
            if not isinstance(slug, str) or not slug:
                logfire.warn(
                    "Skipping Contentful entry without slug",
                    entry_id=item.get("sys", {}).get("id")
                    if isinstance(item, dict)
                    else None,
                )
                continue

            posts.append(
                Post(
                    slug=PostSlug(slug),
                    title=plain_text(fields.get("title")),
                    author=plain_text(fields.get("author")),
                    date=plain_text(fields.get("date")),
                    content=plain_text(fields.get("content")),
                )
            )
        return posts
