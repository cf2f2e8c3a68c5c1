"""Explicit interaction tracking service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from roost.domain.model import CommentInteraction
from roost.domain.repository import InteractionRepository
from roost.domain.value import CommentId, InteractionId, InteractionType

from .base import Service
from .view_tracking import ViewerIdentity


class InteractionService(Service):
    """Records interactions reported by clients (shares, deep reads...)."""

    def __init__(self, interaction_repository: InteractionRepository) -> None:
        """Initialize interaction service.

        Args:
            interaction_repository: Interaction repository
        """
        self.interaction_repository = interaction_repository

    async def record(
        self,
        comment_id: CommentId,
        interaction_type: InteractionType,
        viewer: ViewerIdentity,
        metadata: dict[str, Any] | None = None,
    ) -> CommentInteraction:
        """Record one interaction with a comment.

        Args:
            comment_id: The comment interacted with
            interaction_type: Kind of interaction
            viewer: Who interacted
            metadata: Free-form client data

        Returns:
            The recorded interaction
        """
        with logfire.span(
            "interaction_service.record",
            comment_id=str(comment_id),
            interaction_type=interaction_type.value,
        ):
            interaction = await self.interaction_repository.save(
                CommentInteraction(
                    id=InteractionId(uuid4()),
                    comment_id=comment_id,
                    interaction_type=interaction_type,
                    user_id=viewer.user_id,
                    session_id=viewer.session_id,
                    ip_address=viewer.ip_address,
                    user_agent=viewer.user_agent,
                    metadata=metadata or {},
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Interaction tracked",
                interaction_id=str(interaction.id),
                comment_id=str(comment_id),
                interaction_type=interaction_type.value,
            )
            return interaction
