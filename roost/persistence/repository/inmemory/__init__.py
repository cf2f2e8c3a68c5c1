"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .interaction import InMemoryInteractionRepository
from .metrics import InMemoryCommentMetricsRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .reaction import InMemoryReactionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentMetricsRepository",
    "InMemoryCommentRepository",
    "InMemoryInteractionRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryReactionRepository",
    "InMemoryUserRepository",
]
