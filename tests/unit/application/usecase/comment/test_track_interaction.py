"""Unit tests for TrackInteractionUseCase."""

from uuid import uuid4

import pytest

from roost.application.usecase.comment import (
    TrackInteractionRequest,
    TrackInteractionUseCase,
)
from roost.domain.error import NotFoundError
from roost.domain.repository import CommentRepository, InteractionRepository
from roost.domain.service import ViewerIdentity
from roost.domain.value import InteractionType, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTrackInteractionUseCase:
    """Tests for TrackInteractionUseCase."""

    @pytest.mark.asyncio
    async def test_records_interaction_with_viewer_details(self, unit_env):
        use_case = await unit_env.get(TrackInteractionUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        interaction_repo = await unit_env.get(InteractionRepository)
        comment = make_comment(make_post().id)
        await comment_repo.save(comment)
        viewer = ViewerIdentity(
            user_id=UserId(uuid4()),
            session_id="sess-1",
            ip_address="10.0.0.1",
            user_agent="pytest",
        )

        response = await use_case.execute(
            TrackInteractionRequest(
                comment_id=str(comment.id),
                interaction_type=InteractionType.SHARE,
                metadata={"target": "email"},
                viewer=viewer,
            )
        )

        assert response.message == "Interaction tracked successfully"
        [recorded] = interaction_repo.all
        assert str(recorded.id) == response.interaction_id
        assert recorded.interaction_type == InteractionType.SHARE
        assert recorded.user_id == viewer.user_id
        assert recorded.session_id == "sess-1"
        assert recorded.ip_address == "10.0.0.1"
        assert recorded.metadata == {"target": "email"}

    @pytest.mark.asyncio
    async def test_unknown_comment_is_not_found(self, unit_env):
        """Nothing is recorded for a missing comment."""
        use_case = await unit_env.get(TrackInteractionUseCase)
        interaction_repo = await unit_env.get(InteractionRepository)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                TrackInteractionRequest(
                    comment_id=str(uuid4()),
                    interaction_type=InteractionType.DEEP_READ,
                    viewer=ViewerIdentity(session_id="anon_x"),
                )
            )

        assert interaction_repo.all == []
