"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, literal, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roost.domain.error import MaxDepthExceededError, QueryTimeoutError
from roost.domain.model import Comment
from roost.domain.model.comment import MAX_COMMENT_DEPTH
from roost.domain.repository import CommentRepository
from roost.domain.service.ranking import select_ordering
from roost.domain.value import CommentId, CommentSort, PostId
from roost.persistence.mappers import comment_to_dict, row_to_comment
from roost.persistence.tables import (
    DEPTH_CONSTRAINT,
    comment_metrics_table,
    comments_table,
)

# Message Postgres reports when statement_timeout cancels a query
STATEMENT_TIMEOUT_MESSAGE = "canceling statement due to statement timeout"


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        post_id: PostId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of top-level comments for a post."""
        rule = select_ordering(sort)
        stmt = select(comments_table).where(
            comments_table.c.post_id == post_id,
            comments_table.c.parent_id.is_(None),
            comments_table.c.is_published.is_(True),
        )

        if rule.is_scored:
            score = comment_metrics_table.c[rule.score_field]
            stmt = stmt.select_from(
                comments_table.outerjoin(
                    comment_metrics_table,
                    comment_metrics_table.c.comment_id == comments_table.c.id,
                )
            ).order_by(score.desc().nulls_last(), comments_table.c.created_at.desc())
        elif rule.newest_first:
            stmt = stmt.order_by(comments_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(comments_table.c.created_at.asc())

        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(
        self, parent_ids: Sequence[CommentId], timeout: Optional[float] = None
    ) -> List[Comment]:
        """Find the direct children of several comments in one query.

        With a ``timeout`` the query runs in a savepoint under a local
        ``statement_timeout``. Postgres cancels it server side, the savepoint
        rolls back, and the request session stays usable.
        """
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.parent_id.in_(list(parent_ids)),
                comments_table.c.is_published.is_(True),
            )
            .order_by(comments_table.c.created_at.asc())
        )
        if timeout is None:
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

        timeout_ms = str(max(1, int(timeout * 1000)))
        try:
            async with self.session.begin_nested():
                previous = await self.session.scalar(
                    select(func.current_setting("statement_timeout"))
                )
                await self.session.execute(
                    select(func.set_config("statement_timeout", timeout_ms, True))
                )
                result = await self.session.execute(stmt)
                rows = result.fetchall()
                await self.session.execute(
                    select(func.set_config("statement_timeout", previous, True))
                )
        except DBAPIError as e:
            if STATEMENT_TIMEOUT_MESSAGE in str(e.orig):
                raise QueryTimeoutError("find_children", timeout) from e
            raise
        return [row_to_comment(row._asdict()) for row in rows]

    async def find_replies(
        self,
        parent_id: CommentId,
        newest_first: bool = False,
        limit: Optional[int] = 20,
    ) -> List[Comment]:
        """Find direct replies to one comment."""
        order = (
            comments_table.c.created_at.desc()
            if newest_first
            else comments_table.c.created_at.asc()
        )
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.parent_id == parent_id,
                comments_table.c.is_published.is_(True),
            )
            .order_by(order)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count published comments for a post, replies included."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.is_published.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_descendants(self, comment_id: CommentId) -> int:
        """Count every comment below a comment using a recursive CTE."""
        subtree = (
            select(comments_table.c.id, literal(1).label("level"))
            .where(comments_table.c.parent_id == comment_id)
            .cte("subtree", recursive=True)
        )
        parent = subtree.alias()
        child = comments_table.alias()
        subtree = subtree.union_all(
            select(child.c.id, (parent.c.level + 1).label("level")).where(
                child.c.parent_id == parent.c.id,
                # Stored depth is bounded, so is the recursion
                parent.c.level <= MAX_COMMENT_DEPTH,
            )
        )
        stmt = select(func.count()).select_from(subtree)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        try:
            # Savepoint, so a rejected row leaves the request transaction usable
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if DEPTH_CONSTRAINT in str(e.orig):
                raise MaxDepthExceededError(MAX_COMMENT_DEPTH) from e
            raise

        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; descendants and reactions go by FK cascade."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
