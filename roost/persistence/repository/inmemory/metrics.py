"""In-memory comment metrics repository for testing."""

from typing import Iterable, Optional, Sequence

from roost.domain.model import CommentMetrics
from roost.domain.repository.metrics import CommentMetricsRepository
from roost.domain.value import CommentId


class InMemoryCommentMetricsRepository(CommentMetricsRepository):
    """In-memory implementation of CommentMetricsRepository for testing."""

    def __init__(self) -> None:
        self._metrics: dict[CommentId, CommentMetrics] = {}
        self.fail_with: Exception | None = None

    def get(self, comment_id: CommentId) -> Optional[CommentMetrics]:
        """Synchronous lookup used for in-process ordering."""
        return self._metrics.get(comment_id)

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, CommentMetrics]:
        """Find metrics rows for several comments."""
        if self.fail_with is not None:
            raise self.fail_with
        return {cid: self._metrics[cid] for cid in comment_ids if cid in self._metrics}

    async def save(self, metrics: CommentMetrics) -> CommentMetrics:
        """Create or replace the metrics row of a comment."""
        self._metrics[metrics.comment_id] = metrics
        return metrics

    def discard_comments(self, comment_ids: Iterable[CommentId]) -> None:
        """Drop metrics of deleted comments."""
        for comment_id in comment_ids:
            self._metrics.pop(comment_id, None)
