"""Comment metrics lookup service."""

from typing import Sequence

import logfire

from roost.domain.model import CommentMetrics
from roost.domain.repository import CommentMetricsRepository
from roost.domain.value import CommentId

from .base import Service


class MetricsService(Service):
    """Domain service for reading precomputed comment metrics."""

    def __init__(self, metrics_repository: CommentMetricsRepository) -> None:
        """Initialize metrics service.

        Args:
            metrics_repository: Comment metrics repository
        """
        self.metrics_repository = metrics_repository

    async def lookup(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, CommentMetrics]:
        """Fetch metrics for the given comments.

        Missing rows are left out. A store failure is logged and yields an
        empty mapping, so every comment renders with zeroed metrics.

        Args:
            comment_ids: Comments to look up

        Returns:
            Metrics keyed by comment ID
        """
        if not comment_ids:
            return {}

        with logfire.span("metrics_service.lookup", comments=len(comment_ids)):
            try:
                return await self.metrics_repository.find_by_comments(
                    list(comment_ids)
                )
            except Exception as e:
                logfire.error(
                    "Metrics lookup failed, returning empty metrics",
                    comments=len(comment_ids),
                    error=str(e),
                )
                return {}
