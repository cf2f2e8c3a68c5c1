"""In-memory notification repository for testing."""

from roost.domain.model import Notification
from roost.domain.repository.notification import NotificationRepository
from roost.domain.value import UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []
        self.fail_with: Exception | None = None

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        if self.fail_with is not None:
            raise self.fail_with
        self._notifications.append(notification)
        return notification

    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        """Find notifications addressed to a user, newest first."""
        found = [n for n in self._notifications if n.user_id == user_id]
        found.sort(key=lambda n: n.created_at, reverse=True)
        return found

    @property
    def all(self) -> list[Notification]:
        """Every saved notification."""
        return list(self._notifications)
