"""Get comments use case (chronological threads)."""

from pydantic import BaseModel, Field

from roost.application.usecase.base import BaseUseCase
from roost.config import CommentSettings
from roost.domain.service import (
    CommentService,
    Pagination,
    ReactionService,
    ReplyExpansionService,
    UserService,
    paginate,
    sort_replies,
)
from roost.domain.value import ChronologicalSort, PostId

from .common import CommentItem, assemble_thread, node_to_item, parse_id


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    sort: ChronologicalSort = ChronologicalSort.OLDEST
    limit: int = Field(default=10, ge=1, le=100)
    page: int = Field(default=1, ge=1)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total_count: int
    sort: ChronologicalSort
    pagination: Pagination


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for reading a page of comment threads in time order.

    Every reply below the page's top-level comments is loaded, down to the
    retrieval cap, and replies at every level follow the requested order.
    """

    def __init__(
        self,
        comment_service: CommentService,
        reply_expansion_service: ReplyExpansionService,
        reaction_service: ReactionService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            reply_expansion_service: Reply fetcher
            reaction_service: Reaction aggregation
            user_service: Author lookup
            settings: Comment settings
        """
        self.comment_service = comment_service
        self.reply_expansion_service = reply_expansion_service
        self.reaction_service = reaction_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Post ID, order and page

        Returns:
            Nested comment threads with pagination

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "post_id"))
        await self.comment_service.get_post(post_id)

        total_count = await self.comment_service.count_thread(post_id)
        pagination = paginate(total_count, request.page, request.limit)

        top_level = await self.comment_service.get_top_level(
            post_id,
            request.sort.to_comment_sort(),
            limit=request.limit,
            offset=pagination.offset,
        )
        replies = await self.reply_expansion_service.expand(
            [c.id for c in top_level], load_all_replies=True
        )

        tree = await assemble_thread(
            top_level, replies, self.reaction_service, self.user_service
        )
        sort_replies(tree, newest_first=request.sort == ChronologicalSort.NEWEST)

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[node_to_item(n, self.settings.preview_length) for n in tree],
            total_count=total_count,
            sort=request.sort,
            pagination=pagination,
        )
