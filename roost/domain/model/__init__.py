"""Domain model entities for Roost."""

from roost.domain.model.comment import Comment
from roost.domain.model.interaction import CommentInteraction
from roost.domain.model.metrics import CommentMetrics
from roost.domain.model.notification import Notification
from roost.domain.model.post import Post
from roost.domain.model.reaction import Reaction, ReactionCount
from roost.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reaction",
    "ReactionCount",
    "CommentMetrics",
    "CommentInteraction",
    "Notification",
]
