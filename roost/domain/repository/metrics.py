"""Comment metrics repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from roost.domain.model.metrics import CommentMetrics
from roost.domain.value import CommentId


class CommentMetricsRepository(ABC):
    """Repository for precomputed comment metrics."""

    @abstractmethod
    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, CommentMetrics]:
        """Find metrics rows for several comments.

        Args:
            comment_ids: Comments to look up

        Returns:
            Metrics keyed by comment ID; comments without a row are absent
        """
        pass

    @abstractmethod
    async def save(self, metrics: CommentMetrics) -> CommentMetrics:
        """Create or replace the metrics row of a comment."""
        pass
