"""Comment entity.

Comments are threaded discussions on posts. A comment either sits at the
top level of a post or replies to another comment of the same post, down
to a fixed maximum nesting depth.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from roost.domain.model.common import DomainModel
from roost.domain.value import CommentId, PostId, UserId

MAX_CONTENT_LENGTH = 2000
MAX_COMMENT_DEPTH = 5


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies),
      fixed when the comment is created
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0, le=MAX_COMMENT_DEPTH)
    is_published: bool = True
    is_edited: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    edited_at: Optional[datetime] = None

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        """Store content without surrounding whitespace."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Comment content cannot be empty")
        return stripped

    @property
    def is_reply(self) -> bool:
        """Check if this comment replies to another comment."""
        return self.parent_id is not None

    @property
    def word_count(self) -> int:
        """Number of whitespace separated words in the content."""
        return len(self.content.split())

    def preview(self, length: int = 100) -> str:
        """Short form of the content for list views.

        Args:
            length: Maximum number of content characters kept

        Returns:
            Content cut to ``length`` characters, with ``...`` appended when cut
        """
        if len(self.content) <= length:
            return self.content
        return self.content[:length].rstrip() + "..."
