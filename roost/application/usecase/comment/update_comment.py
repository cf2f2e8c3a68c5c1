"""Update comment use case."""

from pydantic import BaseModel

from roost.application.usecase.base import BaseUseCase
from roost.config import CommentSettings
from roost.domain.service import CommentService, ReactionService, UserService
from roost.domain.value import CommentId, UserId

from .common import CommentContent, CommentItem, parse_id, to_comment_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: CommentContent


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem
    message: str = "Comment updated successfully"


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        reaction_service: ReactionService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            reaction_service: Reaction aggregation
            user_service: Author lookup
            settings: Comment settings
        """
        self.comment_service = comment_service
        self.reaction_service = reaction_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Comment ID, user ID and new content

        Returns:
            Updated comment details

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user doesn't own the comment
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment_id"))
        user_id = UserId(parse_id(request.user_id, "user_id"))

        updated = await self.comment_service.update_content(
            comment_id, user_id, request.content
        )

        reactions = await self.reaction_service.aggregate([comment_id])
        authors = await self.user_service.get_authors([updated.author_id])
        return UpdateCommentResponse(
            comment=to_comment_item(
                updated,
                self.settings.preview_length,
                author=authors.get(updated.author_id),
                reaction_counts=reactions.get(comment_id),
            )
        )
