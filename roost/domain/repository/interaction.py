"""Comment interaction repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from roost.domain.model.interaction import CommentInteraction
from roost.domain.value import CommentId, UserId


class InteractionRepository(ABC):
    """Repository for comment engagement events."""

    @abstractmethod
    async def save(self, interaction: CommentInteraction) -> CommentInteraction:
        """Record an interaction.

        Args:
            interaction: The interaction to record

        Returns:
            The recorded interaction
        """
        pass

    @abstractmethod
    async def has_recent_view(
        self,
        comment_id: CommentId,
        since: datetime,
        user_id: Optional[UserId] = None,
        session_id: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> bool:
        """Check whether the same viewer already viewed a comment.

        A viewer matches on user ID, session ID or IP address, whichever
        of them are known.

        Args:
            comment_id: The viewed comment
            since: Only views recorded after this moment count
            user_id: Authenticated viewer, if any
            session_id: Viewer session token, if any
            ip_address: Viewer IP address, if any

        Returns:
            True if a matching view exists
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[CommentInteraction]:
        """Find every interaction recorded for a comment."""
        pass
