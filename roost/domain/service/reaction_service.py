"""Reaction aggregation service."""

from typing import Sequence

import logfire

from roost.domain.model import ReactionCount
from roost.domain.repository import ReactionRepository
from roost.domain.value import CommentId

from .base import Service


class ReactionService(Service):
    """Domain service for reading reaction counts."""

    def __init__(self, reaction_repository: ReactionRepository) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
        """
        self.reaction_repository = reaction_repository

    async def aggregate(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[ReactionCount]]:
        """Count reactions per emoji for every given comment.

        Reactions are decoration: if the store fails, every comment gets an
        empty list and the error is only logged.

        Args:
            comment_ids: Comments to aggregate

        Returns:
            Counts for every requested ID, most used emoji first
        """
        result: dict[CommentId, list[ReactionCount]] = {
            comment_id: [] for comment_id in comment_ids
        }
        if not result:
            return result

        with logfire.span("reaction_service.aggregate", comments=len(result)):
            try:
                counts = await self.reaction_repository.count_by_comments(
                    list(result)
                )
            except Exception as e:
                logfire.error(
                    "Reaction aggregation failed, returning empty counts",
                    comments=len(result),
                    error=str(e),
                )
                return result

            for comment_id, comment_counts in counts.items():
                if comment_id in result:
                    result[comment_id] = sorted(
                        comment_counts, key=lambda rc: rc.count, reverse=True
                    )
            return result
