"""Post entity.

Posts are owned by the posts service; comments only need to know that a
post exists and who wrote it.
"""

from datetime import datetime

from pydantic import Field

from roost.domain.model.common import DomainModel
from roost.domain.value import PostId, UserId


class Post(DomainModel):
    """Post a comment thread hangs off."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    created_at: datetime = Field(default_factory=datetime.now)
