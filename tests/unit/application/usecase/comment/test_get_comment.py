"""Unit tests for GetCommentUseCase."""

from uuid import uuid4

import pytest

from roost.application.usecase.comment import GetCommentRequest, GetCommentUseCase
from roost.domain.error import NotFoundError
from roost.domain.repository import CommentRepository, ReactionRepository
from tests.conftest import make_comment, make_post, make_reaction
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_comment_with_direct_replies(self, unit_env):
        """The comment carries its direct replies and reaction counts."""
        use_case = await unit_env.get(GetCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        reaction_repo = await unit_env.get(ReactionRepository)
        post = make_post()
        comment = make_comment(post.id, content="Look at this")
        reply = make_comment(post.id, parent=comment, minutes=1)
        nested = make_comment(post.id, parent=reply, minutes=2)
        for c in (comment, reply, nested):
            await comment_repo.save(c)
        await reaction_repo.save(make_reaction(comment.id, "fire"))
        await reaction_repo.save(make_reaction(reply.id, "heart"))

        item = await use_case.execute(GetCommentRequest(comment_id=str(comment.id)))

        assert item.id == str(comment.id)
        assert item.content == "Look at this"
        assert item.preview == "Look at this"
        assert item.is_reply is False
        assert [(r.emoji_name, r.count) for r in item.reaction_counts] == [("fire", 1)]
        assert [r.id for r in item.replies] == [str(reply.id)]
        assert item.replies[0].reaction_counts[0].emoji_name == "heart"
        assert item.replies[0].replies == []

    @pytest.mark.asyncio
    async def test_unpublished_comment_is_not_found(self, unit_env):
        """Unpublished comments are hidden."""
        use_case = await unit_env.get(GetCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        hidden = make_comment(make_post().id, is_published=False)
        await comment_repo.save(hidden)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentRequest(comment_id=str(hidden.id)))

    @pytest.mark.asyncio
    async def test_unknown_comment_is_not_found(self, unit_env):
        """Unknown IDs are reported."""
        use_case = await unit_env.get(GetCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentRequest(comment_id=str(uuid4())))
