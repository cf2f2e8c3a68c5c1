"""PostgreSQL implementation of Reaction repository."""

from collections import defaultdict
from typing import List, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from roost.domain.model import Reaction, ReactionCount
from roost.domain.repository import ReactionRepository
from roost.domain.value import CommentId
from roost.persistence.mappers import reaction_to_dict, row_to_reaction
from roost.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, List[ReactionCount]]:
        """Count reactions per emoji with a single grouped query."""
        if not comment_ids:
            return {}
        count = func.count().label("count")
        stmt = (
            select(reactions_table.c.comment_id, reactions_table.c.emoji_name, count)
            .where(reactions_table.c.comment_id.in_(list(comment_ids)))
            .group_by(reactions_table.c.comment_id, reactions_table.c.emoji_name)
            .order_by(reactions_table.c.comment_id, count.desc())
        )
        # Savepoint, so a failed read leaves the request session usable
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        counts: dict[CommentId, List[ReactionCount]] = defaultdict(list)
        for comment_id, emoji_name, n in rows:
            counts[CommentId(comment_id)].append(
                ReactionCount(emoji_name=emoji_name, count=n)
            )
        return dict(counts)

    async def find_by_comment(self, comment_id: CommentId) -> List[Reaction]:
        """Find every reaction row of a comment."""
        stmt = select(reactions_table).where(reactions_table.c.comment_id == comment_id)
        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction."""
        stmt = insert(reactions_table).values(**reaction_to_dict(reaction))
        await self.session.execute(stmt)
        await self.session.flush()
        return reaction
