"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from roost.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from roost.domain.error import NotFoundError, ValidationError
from roost.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from roost.domain.value import ChronologicalSort
from tests.conftest import make_comment, make_post, make_reaction, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_post(unit_env):
    post_repo = await unit_env.get(PostRepository)
    post = make_post()
    await post_repo.save(post)
    return post


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_threads_with_authors_and_reactions(self, unit_env):
        """Top-level comments come with replies, authors and reactions."""
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        reaction_repo = await unit_env.get(ReactionRepository)
        post = await _seed_post(unit_env)
        author = make_user("judy", first_name="Judy")
        await user_repo.save(author)

        root = make_comment(post.id, author_id=author.id)
        reply = make_comment(post.id, parent=root, minutes=1)
        await comment_repo.save(root)
        await comment_repo.save(reply)
        await reaction_repo.save(make_reaction(root.id, "heart"))

        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        assert response.post_id == str(post.id)
        assert response.total_count == 2
        assert len(response.comments) == 1
        item = response.comments[0]
        assert item.id == str(root.id)
        assert item.author.username == "judy"
        assert item.author.full_name == "Judy"
        assert [(r.emoji_name, r.count) for r in item.reaction_counts] == [("heart", 1)]
        assert [r.id for r in item.replies] == [str(reply.id)]
        assert item.replies[0].depth == 1
        assert item.replies[0].author is None
        assert item.metrics is None

    @pytest.mark.asyncio
    async def test_loads_every_level(self, unit_env):
        """Chronological threads are expanded all the way down."""
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)

        parent = make_comment(post.id)
        await comment_repo.save(parent)
        for i in range(5):
            child = make_comment(post.id, parent=parent, minutes=i + 1)
            await comment_repo.save(child)
            parent = child

        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        depth = 0
        node = response.comments[0]
        while node.replies:
            node = node.replies[0]
            depth += 1
        assert depth == 5

    @pytest.mark.asyncio
    async def test_newest_sort_applies_at_every_level(self, unit_env):
        """Replies follow the requested direction too."""
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)

        old_root = make_comment(post.id, minutes=0)
        new_root = make_comment(post.id, minutes=1)
        early_reply = make_comment(post.id, parent=old_root, minutes=2)
        late_reply = make_comment(post.id, parent=old_root, minutes=3)
        for comment in (old_root, new_root, early_reply, late_reply):
            await comment_repo.save(comment)

        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), sort=ChronologicalSort.NEWEST)
        )

        assert [c.id for c in response.comments] == [str(new_root.id), str(old_root.id)]
        assert [r.id for r in response.comments[1].replies] == [
            str(late_reply.id),
            str(early_reply.id),
        ]

    @pytest.mark.asyncio
    async def test_pagination_uses_thread_count(self, unit_env):
        """25 top-level comments, 10 per page: three pages."""
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        for i in range(25):
            await comment_repo.save(make_comment(post.id, minutes=i))

        pages = [
            await use_case.execute(
                GetCommentsRequest(post_id=str(post.id), limit=10, page=page)
            )
            for page in (1, 2, 3)
        ]

        assert [len(p.comments) for p in pages] == [10, 10, 5]
        assert all(p.pagination.total_pages == 3 for p in pages)
        assert [p.pagination.has_next_page for p in pages] == [True, True, False]
        assert [p.pagination.has_prev_page for p in pages] == [False, True, True]

    @pytest.mark.asyncio
    async def test_total_count_includes_replies(self, unit_env):
        """total_count is the whole thread, not the top-level count."""
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        root = make_comment(post.id)
        await comment_repo.save(root)
        for i in range(3):
            await comment_repo.save(make_comment(post.id, parent=root, minutes=i + 1))

        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        assert response.total_count == 4
        assert len(response.comments) == 1

    @pytest.mark.asyncio
    async def test_reaction_failure_still_returns_comments(self, unit_env):
        """Reaction counts degrade to empty lists."""
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        reaction_repo = await unit_env.get(ReactionRepository)
        post = await _seed_post(unit_env)
        await comment_repo.save(make_comment(post.id))
        reaction_repo.fail_with = RuntimeError("reactions down")

        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        assert len(response.comments) == 1
        assert response.comments[0].reaction_counts == []

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Unknown posts are reported."""
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_post_id_raises_validation_error(self, unit_env):
        """IDs are parsed before any store access."""
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetCommentsRequest(post_id="not-a-uuid"))
