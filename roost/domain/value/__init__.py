"""Domain value objects for Roost."""

from roost.domain.value.identifiers import (
    CommentId,
    InteractionId,
    NotificationId,
    PostId,
    ReactionId,
    UserId,
)
from roost.domain.value.types import (
    ChronologicalSort,
    CommentSort,
    EmojiName,
    InteractionType,
    NotificationPriority,
    NotificationType,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReactionId",
    "InteractionId",
    "NotificationId",
    # Types
    "CommentSort",
    "ChronologicalSort",
    "InteractionType",
    "NotificationType",
    "NotificationPriority",
    "Username",
    "EmojiName",
]
