"""Precomputed engagement metrics for a comment.

Metrics rows are written by the analytics pipeline and only read here.
"""

from typing import Optional

from pydantic import Field

from roost.domain.model.common import DomainModel
from roost.domain.value import CommentId


class CommentMetrics(DomainModel):
    """Engagement counters and ranking scores of a comment."""

    comment_id: CommentId
    view_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    reaction_count: int = Field(default=0, ge=0)
    deep_read_count: int = Field(default=0, ge=0)
    engagement_score: Optional[float] = None
    combined_algorithm_score: Optional[float] = None

    @classmethod
    def empty(cls, comment_id: CommentId) -> "CommentMetrics":
        """Metrics for a comment that has no row yet."""
        return cls(comment_id=comment_id)
