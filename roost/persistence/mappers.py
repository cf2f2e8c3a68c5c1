"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from roost.domain.model import (
    Comment,
    CommentInteraction,
    CommentMetrics,
    Notification,
    Post,
    Reaction,
    User,
)
from roost.domain.value import (
    CommentId,
    EmojiName,
    InteractionId,
    InteractionType,
    NotificationId,
    NotificationPriority,
    NotificationType,
    PostId,
    ReactionId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        first_name=row.get("first_name") or "",
        last_name=row.get("last_name") or "",
        avatar_url=row.get("avatar_url"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        is_published=row["is_published"],
        is_edited=row["is_edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        edited_at=row.get("edited_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        emoji_name=EmojiName(row["emoji_name"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict."""
    return reaction.model_dump()


def row_to_metrics(row: Dict[str, Any]) -> CommentMetrics:
    """Convert database row to CommentMetrics domain model."""
    return CommentMetrics(
        comment_id=CommentId(_uuid(row["comment_id"])),
        view_count=row["view_count"],
        reply_count=row["reply_count"],
        reaction_count=row["reaction_count"],
        deep_read_count=row["deep_read_count"],
        engagement_score=row.get("engagement_score"),
        combined_algorithm_score=row.get("combined_algorithm_score"),
    )


def metrics_to_dict(metrics: CommentMetrics) -> Dict[str, Any]:
    """Convert CommentMetrics domain model to database dict."""
    return metrics.model_dump()


def row_to_interaction(row: Dict[str, Any]) -> CommentInteraction:
    """Convert database row to CommentInteraction domain model."""
    return CommentInteraction(
        id=InteractionId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        interaction_type=InteractionType(row["interaction_type"]),
        user_id=UserId(_uuid(row["user_id"])) if row.get("user_id") else None,
        session_id=row.get("session_id"),
        ip_address=row.get("ip_address"),
        user_agent=row.get("user_agent"),
        metadata=row.get("metadata") or {},
        created_at=row["created_at"],
    )


def interaction_to_dict(interaction: CommentInteraction) -> Dict[str, Any]:
    """Convert CommentInteraction domain model to database dict."""
    data = interaction.model_dump()
    data["interaction_type"] = interaction.interaction_type.value
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        actor_id=UserId(_uuid(row["actor_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        entity_type=row["entity_type"],
        entity_id=row["entity_id"],
        action_url=row["action_url"],
        priority=NotificationPriority(row["priority"]),
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    data["priority"] = notification.priority.value
    return data
