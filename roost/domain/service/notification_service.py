"""Notifications raised by new comments."""

from uuid import uuid4

import logfire

from roost.domain.model import Comment, Notification, Post
from roost.domain.repository import CommentRepository, NotificationRepository
from roost.domain.value import NotificationId, NotificationType

from .base import Service


def comment_action_url(comment: Comment) -> str:
    """Link that opens the post scrolled to the comment."""
    return f"/posts/{comment.post_id}#comment-{comment.id}"


class NotificationService(Service):
    """Creates notification rows for comment activity."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            comment_repository: Comment repository (reply recipients)
        """
        self.notification_repository = notification_repository
        self.comment_repository = comment_repository

    async def notify_comment_created(
        self, comment: Comment, post: Post, actor_username: str
    ) -> Notification | None:
        """Tell the post author, or the parent comment's author, about a comment.

        Nobody is notified about their own comment. Failures are logged and
        never reach the caller.

        Args:
            comment: The new comment
            post: The post it was written on
            actor_username: Username of the comment author

        Returns:
            The created notification, or None if nobody was notified
        """
        with logfire.span(
            "notification_service.notify_comment_created",
            comment_id=str(comment.id),
            is_reply=comment.is_reply,
        ):
            try:
                return await self._notify(comment, post, actor_username)
            except Exception as e:
                logfire.error(
                    "Failed to create comment notification",
                    comment_id=str(comment.id),
                    error=str(e),
                )
                return None

    async def _notify(
        self, comment: Comment, post: Post, actor_username: str
    ) -> Notification | None:
        if comment.parent_id is not None:
            parent = await self.comment_repository.find_by_id(comment.parent_id)
            if parent is None:
                return None
            recipient_id = parent.author_id
            notification_type = NotificationType.COMMENT_REPLY
            title = "New Reply"
            message = f"{actor_username} replied to your comment"
        else:
            recipient_id = post.author_id
            notification_type = NotificationType.COMMENT
            title = "New Comment"
            message = f"{actor_username} commented on your post"

        if recipient_id == comment.author_id:
            logfire.debug("Skipping self notification", comment_id=str(comment.id))
            return None

        notification = await self.notification_repository.save(
            Notification(
                id=NotificationId(uuid4()),
                user_id=recipient_id,
                actor_id=comment.author_id,
                type=notification_type,
                title=title,
                message=message,
                entity_id=str(comment.id),
                action_url=comment_action_url(comment),
            )
        )
        logfire.info(
            "Comment notification created",
            notification_id=str(notification.id),
            recipient_id=str(recipient_id),
            type=notification_type.value,
        )
        return notification
