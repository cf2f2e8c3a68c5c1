"""Get direct replies use case."""

from pydantic import BaseModel, Field

from roost.application.usecase.base import BaseUseCase
from roost.config import CommentSettings
from roost.domain.service import CommentService, ReactionService, UserService
from roost.domain.value import ChronologicalSort, CommentId

from .common import CommentItem, parse_id, to_comment_item


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str  # UUID string
    sort: ChronologicalSort = ChronologicalSort.OLDEST
    limit: int = Field(default=20, ge=1, le=50)


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    parent_comment_id: str
    replies: list[CommentItem]
    total_count: int  # Number of replies returned
    sort: ChronologicalSort


class GetRepliesUseCase(BaseUseCase[GetRepliesRequest, GetRepliesResponse]):
    """Use case for reading the replies directly below one comment."""

    def __init__(
        self,
        comment_service: CommentService,
        reaction_service: ReactionService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.reaction_service = reaction_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the parent comment does not exist
        """
        parent_id = CommentId(parse_id(request.comment_id, "comment_id"))
        await self.comment_service.get_comment(parent_id)

        replies = await self.comment_service.get_direct_replies(
            parent_id,
            newest_first=request.sort == ChronologicalSort.NEWEST,
            limit=request.limit,
        )
        reactions = await self.reaction_service.aggregate([r.id for r in replies])
        authors = await self.user_service.get_authors(r.author_id for r in replies)

        items = [
            to_comment_item(
                reply,
                self.settings.preview_length,
                author=authors.get(reply.author_id),
                reaction_counts=reactions.get(reply.id),
            )
            for reply in replies
        ]
        return GetRepliesResponse(
            parent_comment_id=request.comment_id,
            replies=items,
            total_count=len(items),
            sort=request.sort,
        )
