"""PostgreSQL implementation of Interaction repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from roost.domain.model import CommentInteraction
from roost.domain.repository import InteractionRepository
from roost.domain.value import CommentId, InteractionType, UserId
from roost.persistence.mappers import interaction_to_dict, row_to_interaction
from roost.persistence.tables import comment_interactions_table


class PostgresInteractionRepository(InteractionRepository):
    """PostgreSQL implementation of InteractionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, interaction: CommentInteraction) -> CommentInteraction:
        """Record an interaction."""
        stmt = insert(comment_interactions_table).values(
            **interaction_to_dict(interaction)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return interaction

    async def has_recent_view(
        self,
        comment_id: CommentId,
        since: datetime,
        user_id: Optional[UserId] = None,
        session_id: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> bool:
        """Check whether the same viewer already viewed a comment."""
        table = comment_interactions_table
        viewer_matches = []
        if user_id is not None:
            viewer_matches.append(table.c.user_id == user_id)
        if session_id is not None:
            viewer_matches.append(table.c.session_id == session_id)
        if ip_address is not None:
            viewer_matches.append(table.c.ip_address == ip_address)
        if not viewer_matches:
            return False

        stmt = (
            select(table.c.id)
            .where(
                table.c.comment_id == comment_id,
                table.c.interaction_type == InteractionType.VIEW.value,
                table.c.created_at > since,
                or_(*viewer_matches),
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_comment(self, comment_id: CommentId) -> List[CommentInteraction]:
        """Find every interaction recorded for a comment."""
        stmt = (
            select(comment_interactions_table)
            .where(comment_interactions_table.c.comment_id == comment_id)
            .order_by(comment_interactions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_interaction(row._asdict()) for row in result.fetchall()]
