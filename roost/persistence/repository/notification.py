"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from roost.domain.model import Notification
from roost.domain.repository import NotificationRepository
from roost.domain.value import UserId
from roost.persistence.mappers import notification_to_dict, row_to_notification
from roost.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        # Savepoint, so a rejected row leaves the comment write committable
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return notification

    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """Find notifications addressed to a user, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(notifications_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]
