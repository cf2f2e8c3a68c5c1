"""Get single comment use case."""

from pydantic import BaseModel

from roost.application.usecase.base import BaseUseCase
from roost.config import CommentSettings
from roost.domain.service import CommentService, ReactionService, UserService
from roost.domain.value import CommentId

from .common import CommentItem, parse_id, to_comment_item


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase(BaseUseCase[GetCommentRequest, CommentItem]):
    """Use case for reading one comment with its direct replies."""

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

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the comment does not exist or is unpublished
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment_id"))
        comment = await self.comment_service.get_comment(comment_id)
        replies = await self.comment_service.get_direct_replies(comment_id, limit=None)

        everything = [comment, *replies]
        reactions = await self.reaction_service.aggregate([c.id for c in everything])
        authors = await self.user_service.get_authors(c.author_id for c in everything)

        preview_length = self.settings.preview_length
        return to_comment_item(
            comment,
            preview_length,
            author=authors.get(comment.author_id),
            reaction_counts=reactions.get(comment.id),
            replies=[
                to_comment_item(
                    reply,
                    preview_length,
                    author=authors.get(reply.author_id),
                    reaction_counts=reactions.get(reply.id),
                )
                for reply in replies
            ],
        )
