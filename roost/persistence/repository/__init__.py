"""PostgreSQL repository implementations."""

from roost.persistence.repository.comment import PostgresCommentRepository
from roost.persistence.repository.interaction import PostgresInteractionRepository
from roost.persistence.repository.metrics import PostgresCommentMetricsRepository
from roost.persistence.repository.notification import PostgresNotificationRepository
from roost.persistence.repository.post import PostgresPostRepository
from roost.persistence.repository.reaction import PostgresReactionRepository
from roost.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReactionRepository",
    "PostgresCommentMetricsRepository",
    "PostgresInteractionRepository",
    "PostgresNotificationRepository",
]
