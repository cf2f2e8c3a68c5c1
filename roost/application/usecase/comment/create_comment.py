"""Create comment use case."""

from pydantic import BaseModel

from roost.application.usecase.base import BaseUseCase
from roost.config import CommentSettings
from roost.domain.service import (
    CommentService,
    NotificationService,
    UserService,
)
from roost.domain.value import CommentId, PostId, UserId

from .common import CommentContent, CommentItem, parse_id, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: CommentContent
    author_id: str  # UUID string
    author_username: str  # For notification text
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    message: str


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for creating a comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            notification_service: Notification creation
            user_service: Author lookup
            settings: Comment settings
        """
        self.comment_service = comment_service
        self.notification_service = notification_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        1. Validate and create the comment (depth guard included)
        2. Notify the post author or the parent comment's author

        Args:
            request: Comment creation data

        Returns:
            Created comment details

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the post or parent comment does not exist
            InvalidParentError: If the parent is on another post
            MaxDepthExceededError: If the reply would be nested too deep
        """
        post_id = PostId(parse_id(request.post_id, "post_id"))
        author_id = UserId(parse_id(request.author_id, "author_id"))
        parent_id = (
            CommentId(parse_id(request.parent_id, "parent_id"))
            if request.parent_id
            else None
        )

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )

        post = await self.comment_service.get_post(post_id)
        await self.notification_service.notify_comment_created(
            comment, post, request.author_username
        )

        authors = await self.user_service.get_authors([author_id])
        return CreateCommentResponse(
            comment=to_comment_item(
                comment,
                self.settings.preview_length,
                author=authors.get(author_id),
                reaction_counts=[],
            ),
            message=(
                "Reply created successfully"
                if comment.is_reply
                else "Comment created successfully"
            ),
        )
