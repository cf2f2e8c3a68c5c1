"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from roost.domain.model.reaction import Reaction, ReactionCount
from roost.domain.value import CommentId


class ReactionRepository(ABC):
    """Repository for Reaction entity."""

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, List[ReactionCount]]:
        """Count reactions per emoji for several comments in one query.

        Args:
            comment_ids: Comments to aggregate

        Returns:
            Counts per comment, most used emoji first. Comments without
            reactions are absent.
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Reaction]:
        """Find every reaction row of a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Reaction rows
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction."""
        pass
