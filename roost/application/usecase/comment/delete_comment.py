"""Delete comment use case."""

from pydantic import BaseModel

from roost.application.usecase.base import BaseUseCase
from roost.domain.service import CommentService
from roost.domain.value import CommentId, UserId

from .common import parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_replies: int
    message: str


def deletion_message(deleted_replies: int) -> str:
    """Confirmation text mentioning how many replies went with the comment."""
    message = "Comment deleted successfully"
    if deleted_replies > 0:
        message += f" along with {deleted_replies} replies"
    return message


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for deleting a comment and its whole reply subtree."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user doesn't own the comment
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment_id"))
        user_id = UserId(parse_id(request.user_id, "user_id"))

        deleted_replies = await self.comment_service.delete_comment(comment_id, user_id)
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            deleted_replies=deleted_replies,
            message=deletion_message(deleted_replies),
        )
