"""Reaction entity and aggregated reaction counts."""

from datetime import datetime

from pydantic import Field

from roost.domain.model.common import DomainModel
from roost.domain.value import CommentId, EmojiName, ReactionId, UserId
from roost.domain.value.common import ValueObject


class Reaction(DomainModel):
    """A single emoji reaction left by a user on a comment."""

    id: ReactionId
    comment_id: CommentId
    user_id: UserId
    emoji_name: EmojiName
    created_at: datetime = Field(default_factory=datetime.now)


class ReactionCount(ValueObject):
    """Number of reactions with one emoji on one comment."""

    emoji_name: str
    count: int = Field(ge=0)
