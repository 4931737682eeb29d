"""Domain layer DI providers."""

from dishka import Scope, provide

from petal.config import AuthSettings, ModerationSettings
from petal.domain.repository import CommentRepository, PostRepository
from petal.domain.service import (
    CommentService,
    JWTService,
    ModerationService,
    PostService,
    SpamFilter,
)
from petal.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to align with the repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_spam_filter(self, moderation_settings: ModerationSettings) -> SpamFilter:
        """Provide spam filter, which holds no per-request state."""
        return SpamFilter(threshold=moderation_settings.spam_threshold)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, spam_filter: SpamFilter
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, spam_filter=spam_filter
        )

    @provide
    def get_moderation_service(
        self, comment_repository: CommentRepository, comment_service: CommentService
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_repository=comment_repository, comment_service=comment_service
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)
