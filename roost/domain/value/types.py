"""Domain value objects for Roost.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from roost.domain.value.common import RootValueObject


class CommentSort(str, Enum):
    """Ordering applied to top-level comments of a post.

    Chronological sorts use the creation timestamp. Score based sorts use
    precomputed metrics and push comments without a score to the end.
    """

    NEWEST = "newest"
    OLDEST = "oldest"
    HOT = "hot"
    TRENDING = "trending"
    BEST = "best"

    @property
    def is_chronological(self) -> bool:
        """Check if this sort orders by creation time only."""
        return self in (CommentSort.NEWEST, CommentSort.OLDEST)


class ChronologicalSort(str, Enum):
    """Sort direction for endpoints that only order by time."""

    NEWEST = "newest"
    OLDEST = "oldest"

    def to_comment_sort(self) -> CommentSort:
        """Convert to the equivalent comment sort."""
        return CommentSort(self.value)


class InteractionType(str, Enum):
    """Kind of engagement recorded against a comment."""

    VIEW = "view"
    REPLY = "reply"
    REACTION = "reaction"
    SHARE = "share"
    DEEP_READ = "deep_read"
    QUOTE = "quote"


class NotificationType(str, Enum):
    """Notification types created by comment activity."""

    COMMENT = "comment"
    COMMENT_REPLY = "comment_reply"


class NotificationPriority(str, Enum):
    """Delivery priority of a notification."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class Username(RootValueObject[str]):
    """Public username shown next to comments.

    Examples: 'ada', 'grace_hopper', 'linus.t'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 150:
            raise ValueError("Username must be 1-150 characters")
        return v


class EmojiName(RootValueObject[str]):
    """Normalised reaction emoji name.

    Names are lower-cased and spaces become underscores, so
    'Thumbs Up' and 'thumbs_up' count as the same reaction.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalise(cls, v: str) -> str:
        """Normalise and validate the emoji name."""
        if not isinstance(v, str):
            raise ValueError("Emoji name must be a string")
        normalised = re.sub(r"\s+", "_", v.strip().lower())
        if len(normalised) < 1 or len(normalised) > 50:
            raise ValueError("Emoji name must be 1-50 characters")
        return normalised
