"""Persistence infrastructure providers."""

from dishka import Scope, provide

from quill.domain.repository import CommentRepository
from quill.persistence.repository import InMemoryCommentRepository
from quill.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Comments are kept in process memory for the lifetime of the application.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide the application-wide comment repository."""
        return InMemoryCommentRepository()
