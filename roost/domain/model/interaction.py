"""Comment interaction entity.

One row per tracked engagement event (view, share, deep read...).
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from roost.domain.model.common import DomainModel
from roost.domain.value import CommentId, InteractionId, InteractionType, UserId


class CommentInteraction(DomainModel):
    """An engagement event recorded against a comment.

    Anonymous viewers have no user_id and are identified by session_id.
    """

    id: InteractionId
    comment_id: CommentId
    interaction_type: InteractionType
    user_id: Optional[UserId] = None
    session_id: Optional[str] = Field(default=None, max_length=255)
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
