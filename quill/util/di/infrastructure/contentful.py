"""Contentful infrastructure providers."""

from dishka import Scope, provide

from quill.adapter.contentful import ContentfulPostRepository
from quill.config import ContentfulSettings
from quill.domain.repository import PostRepository
from quill.util.di.base import ProviderBase
from quill.util.error import ConfigurationError


class ContentfulProvider(ProviderBase):
    """Content source component base."""

    __mock_component__ = "contentful"


class ProdContentfulProvider(ContentfulProvider):
    """Production content source backed by Contentful."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_post_repository(self, settings: ContentfulSettings) -> PostRepository:
        """Provide the Contentful post repository.

        Raises:
            ConfigurationError: If Contentful credentials are not configured
        """
        if not settings.space_id:
            raise ConfigurationError("Contentful space ID must be configured")
        if not settings.access_token:
            raise ConfigurationError("Contentful access token must be configured")

        return ContentfulPostRepository(
            space_id=settings.space_id,
            access_token=settings.access_token,
            environment=settings.environment,
            content_type=settings.content_type,
            base_url=settings.base_url,
            page_size=settings.page_size,
            timeout=settings.timeout,
        )
