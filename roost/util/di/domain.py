"""Domain layer DI providers."""

from dishka import Scope, provide

from roost.config import AuthSettings, CommentSettings
from roost.domain.repository import (
    CommentMetricsRepository,
    CommentRepository,
    InteractionRepository,
    NotificationRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from roost.domain.service import (
    CommentService,
    InteractionService,
    JWTService,
    MetricsService,
    NotificationService,
    ReactionService,
    ReplyExpansionService,
    UserService,
    ViewTracker,
)
from roost.domain.service.view_tracking import InteractionRepositoryFactory
from roost.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The view tracker is the exception: its tasks outlive requests, so it is
    APP-scoped and opens its own repositories.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            settings=settings,
        )

    @provide
    def get_reply_expansion_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> ReplyExpansionService:
        """Provide reply expansion service."""
        return ReplyExpansionService(
            comment_repository=comment_repository, settings=settings
        )

    @provide
    def get_reaction_service(
        self, reaction_repository: ReactionRepository
    ) -> ReactionService:
        """Provide reaction aggregation service."""
        return ReactionService(reaction_repository=reaction_repository)

    @provide
    def get_metrics_service(
        self, metrics_repository: CommentMetricsRepository
    ) -> MetricsService:
        """Provide metrics lookup service."""
        return MetricsService(metrics_repository=metrics_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        comment_repository: CommentRepository,
    ) -> NotificationService:
        """Provide notification service."""
        return NotificationService(
            notification_repository=notification_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_interaction_service(
        self, interaction_repository: InteractionRepository
    ) -> InteractionService:
        """Provide interaction tracking service."""
        return InteractionService(interaction_repository=interaction_repository)

    @provide(scope=Scope.APP)
    def get_view_tracker(
        self,
        repository_factory: InteractionRepositoryFactory,
        settings: CommentSettings,
    ) -> ViewTracker:
        """Provide the background view tracker."""
        return ViewTracker(repository_factory=repository_factory, settings=settings)
