"""Notification entity."""

from datetime import datetime

from pydantic import Field

from roost.domain.model.common import DomainModel
from roost.domain.value import (
    NotificationId,
    NotificationPriority,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """In-app notification raised by comment activity.

    Delivery (push, email) happens elsewhere; this service only creates rows.
    """

    id: NotificationId
    user_id: UserId  # Recipient
    actor_id: UserId
    type: NotificationType
    title: str = Field(min_length=1, max_length=200)
    message: str
    entity_type: str = "comment"
    entity_id: str
    action_url: str
    priority: NotificationPriority = NotificationPriority.NORMAL
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
