"""In-memory interaction repository for testing."""

from datetime import datetime
from typing import Optional

from roost.domain.model import CommentInteraction
from roost.domain.repository.interaction import InteractionRepository
from roost.domain.value import CommentId, InteractionType, UserId


class InMemoryInteractionRepository(InteractionRepository):
    """In-memory implementation of InteractionRepository for testing."""

    def __init__(self) -> None:
        self._interactions: list[CommentInteraction] = []
        self.fail_for: set[CommentId] = set()

    async def save(self, interaction: CommentInteraction) -> CommentInteraction:
        """Record an interaction."""
        if interaction.comment_id in self.fail_for:
            raise RuntimeError(f"Cannot record interaction for {interaction.comment_id}")
        self._interactions.append(interaction)
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
        for i in self._interactions:
            if (
                i.comment_id != comment_id
                or i.interaction_type != InteractionType.VIEW
                or i.created_at <= since
            ):
                continue
            if (
                (user_id is not None and i.user_id == user_id)
                or (session_id is not None and i.session_id == session_id)
                or (ip_address is not None and i.ip_address == ip_address)
            ):
                return True
        return False

    async def find_by_comment(self, comment_id: CommentId) -> list[CommentInteraction]:
        """Find every interaction recorded for a comment."""
        return [i for i in self._interactions if i.comment_id == comment_id]

    @property
    def all(self) -> list[CommentInteraction]:
        """Every recorded interaction."""
        return list(self._interactions)
