"""Integration tests for the PostgreSQL comment thread repositories.

These tests verify the SQL behind thread reads and writes: recursive subtree
counts, scored ordering, the depth constraint, grouped reaction counts, and
that a failed secondary statement leaves the request transaction usable.
"""

from uuid import uuid4

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roost.domain.error import MaxDepthExceededError
from roost.domain.model import Comment, Notification, Post, User
from roost.domain.repository import (
    CommentMetricsRepository,
    CommentRepository,
    NotificationRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from roost.domain.service import NotificationService, UserService
from roost.domain.value import CommentSort, NotificationId, NotificationType, UserId
from tests.conftest import (
    make_comment,
    make_metrics,
    make_post,
    make_reaction,
    make_user,
)
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _seed_post(env) -> tuple[User, Post]:
    """Save a user and a post written by them."""
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    author = make_user(f"author_{uuid4().hex[:12]}")
    await user_repo.save(author)
    post = make_post(author_id=author.id)
    await post_repo.save(post)
    return author, post


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_count_descendants_walks_whole_subtree(self, integration_env):
        """The recursive count includes replies at every depth, not siblings."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        author, post = await _seed_post(integration_env)
        root = make_comment(post.id, author_id=author.id)
        reply = make_comment(post.id, parent=root, author_id=author.id, minutes=1)
        nested = make_comment(post.id, parent=reply, author_id=author.id, minutes=2)
        other_reply = make_comment(
            post.id, parent=root, author_id=author.id, minutes=3
        )
        unrelated = make_comment(post.id, author_id=author.id, minutes=4)
        for comment in (root, reply, nested, other_reply, unrelated):
            await comment_repo.save(comment)

        # Act
        total = await comment_repo.count_descendants(root.id)
        leaf_total = await comment_repo.count_descendants(nested.id)

        # Assert
        assert total == 3
        assert leaf_total == 0

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        author, post = await _seed_post(integration_env)
        root = make_comment(post.id, author_id=author.id)
        reply = make_comment(post.id, parent=root, author_id=author.id, minutes=1)
        for comment in (root, reply):
            await comment_repo.save(comment)

        await comment_repo.delete(root.id)

        assert await comment_repo.find_by_id(reply.id) is None

    @pytest.mark.asyncio
    async def test_scored_sort_puts_unscored_comments_last(self, integration_env):
        """Hot ordering uses the metrics outer join with NULLS LAST."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        metrics_repo = await integration_env.get(CommentMetricsRepository)
        author, post = await _seed_post(integration_env)
        low = make_comment(post.id, author_id=author.id, minutes=1)
        unscored = make_comment(post.id, author_id=author.id, minutes=2)
        no_metrics = make_comment(post.id, author_id=author.id, minutes=3)
        high = make_comment(post.id, author_id=author.id, minutes=4)
        for comment in (low, unscored, no_metrics, high):
            await comment_repo.save(comment)
        await metrics_repo.save(make_metrics(low.id, score=1.5))
        await metrics_repo.save(make_metrics(unscored.id, score=None))
        await metrics_repo.save(make_metrics(high.id, score=9.0))

        # Act
        ranked = await comment_repo.find_top_level(post.id, CommentSort.HOT, limit=10)

        # Assert: scored first, then unscored newest first
        assert [c.id for c in ranked] == [high.id, low.id, no_metrics.id, unscored.id]

    @pytest.mark.asyncio
    async def test_depth_constraint_maps_to_max_depth_error(self, integration_env):
        """A row past the depth limit is refused and the session stays usable."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        author, post = await _seed_post(integration_env)
        kept = make_comment(post.id, author_id=author.id)
        await comment_repo.save(kept)
        # Skip model validation to reach the database CHECK
        too_deep = Comment.model_construct(
            **{**make_comment(post.id, author_id=author.id).model_dump(), "depth": 6}
        )

        # Act / Assert
        with pytest.raises(MaxDepthExceededError):
            await comment_repo.save(too_deep)

        assert await comment_repo.find_by_id(kept.id) is not None
        assert await comment_repo.find_by_id(too_deep.id) is None

    @pytest.mark.asyncio
    async def test_find_children_with_timeout_restores_statement_timeout(
        self, integration_env
    ):
        """A bounded lookup returns rows and leaves the session setting alone."""
        comment_repo = await integration_env.get(CommentRepository)
        session = await integration_env.get(AsyncSession)
        author, post = await _seed_post(integration_env)
        root = make_comment(post.id, author_id=author.id)
        reply = make_comment(post.id, parent=root, author_id=author.id, minutes=1)
        for comment in (root, reply):
            await comment_repo.save(comment)
        before = await session.scalar(text("SHOW statement_timeout"))

        children = await comment_repo.find_children([root.id], timeout=5.0)

        assert [c.id for c in children] == [reply.id]
        assert await session.scalar(text("SHOW statement_timeout")) == before


class TestReactionRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_grouped_counts_per_emoji(self, integration_env):
        """Counts are grouped per comment and emoji, largest first."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        reaction_repo = await integration_env.get(ReactionRepository)
        user_repo = await integration_env.get(UserRepository)
        author, post = await _seed_post(integration_env)
        comment = make_comment(post.id, author_id=author.id)
        quiet = make_comment(post.id, author_id=author.id, minutes=1)
        for c in (comment, quiet):
            await comment_repo.save(c)
        fans = [make_user(f"fan_{uuid4().hex[:12]}") for _ in range(3)]
        for fan in fans:
            await user_repo.save(fan)
        for fan in fans:
            await reaction_repo.save(make_reaction(comment.id, "fire", user_id=fan.id))
        await reaction_repo.save(make_reaction(comment.id, "heart", user_id=fans[0].id))

        # Act
        counts = await reaction_repo.count_by_comments([comment.id, quiet.id])

        # Assert
        assert [(rc.emoji_name, rc.count) for rc in counts[comment.id]] == [
            ("fire", 3),
            ("heart", 1),
        ]
        assert quiet.id not in counts


class TestFailedSecondaryWrites:
    """A rejected notification must not poison the request transaction."""

    @pytest.mark.asyncio
    async def test_rejected_notification_keeps_session_usable(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        user_repo = await integration_env.get(UserRepository)
        author, post = await _seed_post(integration_env)
        comment = make_comment(post.id, author_id=author.id)
        await comment_repo.save(comment)
        orphan_notification = Notification(
            id=NotificationId(uuid4()),
            user_id=author.id,
            actor_id=UserId(uuid4()),  # No such user
            type=NotificationType.COMMENT,
            title="New Comment",
            message="someone commented on your post",
            entity_id=str(comment.id),
            action_url=f"/posts/{post.id}#comment-{comment.id}",
        )

        # Act
        with pytest.raises(IntegrityError):
            await notification_repo.save(orphan_notification)

        # Assert: later statements in the same transaction still run
        assert await comment_repo.find_by_id(comment.id) is not None
        assert author.id in await user_repo.find_by_ids([author.id])

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_block_author_lookup(
        self, integration_env
    ):
        """The create flow continues after a swallowed notification failure."""
        # Arrange
        notification_service = await integration_env.get(NotificationService)
        user_service = await integration_env.get(UserService)
        comment_repo = await integration_env.get(CommentRepository)
        author, post = await _seed_post(integration_env)
        saved = make_comment(post.id, author_id=author.id)
        await comment_repo.save(saved)
        # Written by a user the database does not know, so the insert fails
        ghost_comment = make_comment(post.id, minutes=1)

        # Act
        notification = await notification_service.notify_comment_created(
            ghost_comment, post, "ghost"
        )
        authors = await user_service.get_authors([author.id])

        # Assert
        assert notification is None
        assert authors[author.id].username == author.username
        assert await comment_repo.find_by_id(saved.id) is not None
