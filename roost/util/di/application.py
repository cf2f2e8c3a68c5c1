"""Application layer DI providers."""

from dishka import Scope, provide

from roost.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetHierarchicalCommentsUseCase,
    GetRepliesUseCase,
    TrackInteractionUseCase,
    UpdateCommentUseCase,
)
from roost.config import CommentSettings
from roost.domain.service import (
    CommentService,
    InteractionService,
    MetricsService,
    NotificationService,
    ReactionService,
    ReplyExpansionService,
    UserService,
    ViewTracker,
)
from roost.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Read use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        reply_expansion_service: ReplyExpansionService,
        reaction_service: ReactionService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            reply_expansion_service=reply_expansion_service,
            reaction_service=reaction_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_hierarchical_comments_use_case(
        self,
        comment_service: CommentService,
        reply_expansion_service: ReplyExpansionService,
        reaction_service: ReactionService,
        metrics_service: MetricsService,
        user_service: UserService,
        view_tracker: ViewTracker,
        settings: CommentSettings,
    ) -> GetHierarchicalCommentsUseCase:
        """Provide get hierarchical comments use case."""
        return GetHierarchicalCommentsUseCase(
            comment_service=comment_service,
            reply_expansion_service=reply_expansion_service,
            reaction_service=reaction_service,
            metrics_service=metrics_service,
            user_service=user_service,
            view_tracker=view_tracker,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self,
        comment_service: CommentService,
        reaction_service: ReactionService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service,
            reaction_service=reaction_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self,
        comment_service: CommentService,
        reaction_service: ReactionService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service,
            reaction_service=reaction_service,
            user_service=user_service,
            settings=settings,
        )

    # Write use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            notification_service=notification_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        reaction_service: ReactionService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            reaction_service=reaction_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_track_interaction_use_case(
        self,
        comment_service: CommentService,
        interaction_service: InteractionService,
    ) -> TrackInteractionUseCase:
        """Provide track interaction use case."""
        return TrackInteractionUseCase(
            comment_service=comment_service,
            interaction_service=interaction_service,
        )
