"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.domain.repository import CommentRepository, PostRepository
from quill.domain.service import CommentService, PostQueryEngine, PostService
from quill.util.di.base import ProviderBase
from quill.util.locking import KeyedLock


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped. State that must be shared between
    requests (the per-slug comment locks) is APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_comment_locks(self) -> KeyedLock:
        """Provide the application-wide per-slug comment locks."""
        return KeyedLock()

    @provide(scope=Scope.APP)
    def get_post_query_engine(self) -> PostQueryEngine:
        """Provide the post query engine."""
        return PostQueryEngine()

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_locks: KeyedLock
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, comment_locks=comment_locks
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, query_engine: PostQueryEngine
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, query_engine=query_engine)
