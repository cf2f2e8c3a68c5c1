"""Track interaction use case."""

from typing import Any

from pydantic import BaseModel, Field

from roost.application.usecase.base import BaseUseCase
from roost.domain.service import CommentService, InteractionService, ViewerIdentity
from roost.domain.value import CommentId, InteractionType

from .common import parse_id


class TrackInteractionRequest(BaseModel):
    """Track interaction request."""

    comment_id: str  # UUID string
    interaction_type: InteractionType
    metadata: dict[str, Any] = Field(default_factory=dict)
    viewer: ViewerIdentity


class TrackInteractionResponse(BaseModel):
    """Track interaction response."""

    interaction_id: str
    message: str = "Interaction tracked successfully"


class TrackInteractionUseCase(
    BaseUseCase[TrackInteractionRequest, TrackInteractionResponse]
):
    """Use case for recording an interaction reported by a client."""

    def __init__(
        self,
        comment_service: CommentService,
        interaction_service: InteractionService,
    ) -> None:
        self.comment_service = comment_service
        self.interaction_service = interaction_service

    async def execute(
        self, request: TrackInteractionRequest
    ) -> TrackInteractionResponse:
        """Execute track interaction flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment_id"))
        await self.comment_service.get_comment(comment_id)

        interaction = await self.interaction_service.record(
            comment_id,
            request.interaction_type,
            request.viewer,
            metadata=request.metadata,
        )
        return TrackInteractionResponse(interaction_id=str(interaction.id))
