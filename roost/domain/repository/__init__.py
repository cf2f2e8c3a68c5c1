"""Repository interfaces for Roost domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from roost.domain.repository.comment import CommentRepository
from roost.domain.repository.interaction import InteractionRepository
from roost.domain.repository.metrics import CommentMetricsRepository
from roost.domain.repository.notification import NotificationRepository
from roost.domain.repository.post import PostRepository
from roost.domain.repository.reaction import ReactionRepository
from roost.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ReactionRepository",
    "CommentMetricsRepository",
    "InteractionRepository",
    "NotificationRepository",
]
