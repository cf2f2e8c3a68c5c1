"""PostgreSQL implementation of CommentMetrics repository."""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from roost.domain.model import CommentMetrics
from roost.domain.repository import CommentMetricsRepository
from roost.domain.value import CommentId
from roost.persistence.mappers import metrics_to_dict, row_to_metrics
from roost.persistence.tables import comment_metrics_table


class PostgresCommentMetricsRepository(CommentMetricsRepository):
    """PostgreSQL implementation of CommentMetricsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, CommentMetrics]:
        """Find metrics rows for several comments."""
        if not comment_ids:
            return {}
        stmt = select(comment_metrics_table).where(
            comment_metrics_table.c.comment_id.in_(list(comment_ids))
        )
        # Savepoint, so a failed read leaves the request session usable
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        metrics = [row_to_metrics(row._asdict()) for row in rows]
        return {m.comment_id: m for m in metrics}

    async def save(self, metrics: CommentMetrics) -> CommentMetrics:
        """Create or replace the metrics row of a comment."""
        values = metrics_to_dict(metrics)
        stmt = insert(comment_metrics_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comment_metrics_table.c.comment_id],
            set_={k: v for k, v in values.items() if k != "comment_id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return metrics
