"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from quill.config import ContentfulSettings, Settings
from quill.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are supplied as container context, so the app, its middleware
    and every injected dependency share one instance.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_contentful_settings(self, settings: Settings) -> ContentfulSettings:
        """Provide Contentful settings."""
        return settings.contentful
