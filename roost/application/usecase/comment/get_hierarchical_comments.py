"""Get hierarchical comments use case (ranked threads)."""

from pydantic import BaseModel, Field

from roost.application.usecase.base import BaseUseCase
from roost.config import CommentSettings
from roost.domain.service import (
    CommentService,
    MetricsService,
    Pagination,
    ReactionService,
    ReplyExpansionService,
    UserService,
    ViewerIdentity,
    ViewTracker,
    paginate,
    walk,
)
from roost.domain.value import CommentSort, PostId

from .common import CommentItem, assemble_thread, node_to_item, parse_id


class GetHierarchicalCommentsRequest(BaseModel):
    """Get hierarchical comments request."""

    post_id: str  # UUID string
    sort: CommentSort = CommentSort.OLDEST
    limit: int = Field(default=10, ge=1, le=50)
    page: int = Field(default=1, ge=1)
    max_depth: int = Field(default=5, ge=1, le=10)
    load_all_replies: bool = False
    viewer: ViewerIdentity


class AlgorithmMetadata(BaseModel):
    """How the returned threads were ranked and expanded."""

    sort_method: CommentSort
    max_depth: int
    load_all_replies: bool
    interaction_tracking: bool = True


class GetHierarchicalCommentsResponse(BaseModel):
    """Get hierarchical comments response."""

    post_id: str
    comments: list[CommentItem]
    total_count: int
    sort: CommentSort
    algorithm_metadata: AlgorithmMetadata
    pagination: Pagination


class GetHierarchicalCommentsUseCase(
    BaseUseCase[GetHierarchicalCommentsRequest, GetHierarchicalCommentsResponse]
):
    """Use case for reading ranked comment threads with engagement metrics.

    Top-level comments follow the requested ranking; replies keep fetch
    order (oldest first per level). Every returned comment is reported to
    the view tracker without delaying the response.
    """

    def __init__(
        self,
        comment_service: CommentService,
        reply_expansion_service: ReplyExpansionService,
        reaction_service: ReactionService,
        metrics_service: MetricsService,
        user_service: UserService,
        view_tracker: ViewTracker,
        settings: CommentSettings,
    ) -> None:
        """Initialize get hierarchical comments use case.

        Args:
            comment_service: Comment domain service
            reply_expansion_service: Reply fetcher
            reaction_service: Reaction aggregation
            metrics_service: Metrics lookup
            user_service: Author lookup
            view_tracker: Background view recording
            settings: Comment settings
        """
        self.comment_service = comment_service
        self.reply_expansion_service = reply_expansion_service
        self.reaction_service = reaction_service
        self.metrics_service = metrics_service
        self.user_service = user_service
        self.view_tracker = view_tracker
        self.settings = settings

    async def execute(
        self, request: GetHierarchicalCommentsRequest
    ) -> GetHierarchicalCommentsResponse:
        """Execute get hierarchical comments flow.

        Args:
            request: Post ID, ranking, page, expansion depth and viewer

        Returns:
            Ranked comment threads with metrics and pagination

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "post_id"))
        await self.comment_service.get_post(post_id)

        total_count = await self.comment_service.count_thread(post_id)
        pagination = paginate(total_count, request.page, request.limit)

        top_level = await self.comment_service.get_top_level(
            post_id, request.sort, limit=request.limit, offset=pagination.offset
        )
        replies = await self.reply_expansion_service.expand(
            [c.id for c in top_level],
            max_depth=request.max_depth,
            load_all_replies=request.load_all_replies,
        )

        comment_ids = [c.id for c in top_level] + [r.comment.id for r in replies]
        metrics = await self.metrics_service.lookup(comment_ids)
        tree = await assemble_thread(
            top_level,
            replies,
            self.reaction_service,
            self.user_service,
            metrics=metrics,
        )

        self.view_tracker.dispatch(
            [node.comment.id for node in walk(tree)], request.viewer
        )

        return GetHierarchicalCommentsResponse(
            post_id=request.post_id,
            comments=[node_to_item(n, self.settings.preview_length) for n in tree],
            total_count=total_count,
            sort=request.sort,
            algorithm_metadata=AlgorithmMetadata(
                sort_method=request.sort,
                max_depth=request.max_depth,
                load_all_replies=request.load_all_replies,
            ),
            pagination=pagination,
        )
