"""Unit tests for GetHierarchicalCommentsUseCase."""

import pytest

from roost.application.usecase.comment import (
    GetHierarchicalCommentsRequest,
    GetHierarchicalCommentsUseCase,
)
from roost.domain.repository import (
    CommentMetricsRepository,
    CommentRepository,
    InteractionRepository,
    PostRepository,
)
from roost.domain.service import ViewerIdentity, ViewTracker
from roost.domain.value import CommentSort, InteractionType
from tests.conftest import make_comment, make_metrics, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

VIEWER = ViewerIdentity(session_id="anon_test", ip_address="127.0.0.1")


async def _seed_scenario(unit_env):
    """Post with A (no replies) and B (replies C, D; D has reply E)."""
    post_repo = await unit_env.get(PostRepository)
    comment_repo = await unit_env.get(CommentRepository)
    post = make_post()
    await post_repo.save(post)
    a = make_comment(post.id, minutes=0)
    b = make_comment(post.id, minutes=1)
    c = make_comment(post.id, parent=b, minutes=2)
    d = make_comment(post.id, parent=b, minutes=3)
    e = make_comment(post.id, parent=d, minutes=4)
    for comment in (a, b, c, d, e):
        await comment_repo.save(comment)
    return post, (a, b, c, d, e)


class TestGetHierarchicalCommentsUseCase:
    """Tests for GetHierarchicalCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_max_depth_two_stops_below_direct_replies(self, unit_env):
        """B.replies is [C, D] and D.replies is empty."""
        use_case = await unit_env.get(GetHierarchicalCommentsUseCase)
        post, (a, b, c, d, e) = await _seed_scenario(unit_env)

        response = await use_case.execute(
            GetHierarchicalCommentsRequest(
                post_id=str(post.id), max_depth=2, viewer=VIEWER
            )
        )

        by_id = {item.id: item for item in response.comments}
        assert list(by_id) == [str(a.id), str(b.id)]
        assert by_id[str(a.id)].replies == []
        b_item = by_id[str(b.id)]
        assert [r.id for r in b_item.replies] == [str(c.id), str(d.id)]
        assert b_item.replies[1].replies == []

    @pytest.mark.asyncio
    async def test_load_all_replies_includes_deepest(self, unit_env):
        """load_all_replies ignores max_depth."""
        use_case = await unit_env.get(GetHierarchicalCommentsUseCase)
        post, (a, b, c, d, e) = await _seed_scenario(unit_env)

        response = await use_case.execute(
            GetHierarchicalCommentsRequest(
                post_id=str(post.id),
                max_depth=1,
                load_all_replies=True,
                viewer=VIEWER,
            )
        )

        d_item = response.comments[1].replies[1]
        assert [r.id for r in d_item.replies] == [str(e.id)]
        assert d_item.replies[0].depth == 2

    @pytest.mark.asyncio
    async def test_hot_sort_and_metrics(self, unit_env):
        """Scored comments lead; every node carries metrics."""
        use_case = await unit_env.get(GetHierarchicalCommentsUseCase)
        metrics_repo = await unit_env.get(CommentMetricsRepository)
        post, (a, b, c, d, e) = await _seed_scenario(unit_env)
        await metrics_repo.save(make_metrics(b.id, score=5.0, view_count=12))

        response = await use_case.execute(
            GetHierarchicalCommentsRequest(
                post_id=str(post.id), sort=CommentSort.HOT, viewer=VIEWER
            )
        )

        assert [item.id for item in response.comments] == [str(b.id), str(a.id)]
        assert response.comments[0].metrics.algorithm_score == 5.0
        assert response.comments[0].metrics.view_count == 12
        assert response.comments[1].metrics.view_count == 0
        assert response.comments[1].metrics.algorithm_score is None
        assert response.algorithm_metadata.sort_method == CommentSort.HOT
        assert response.algorithm_metadata.interaction_tracking is True

    @pytest.mark.asyncio
    async def test_metrics_failure_renders_zero_metrics(self, unit_env):
        """A failing metrics store does not fail the read."""
        use_case = await unit_env.get(GetHierarchicalCommentsUseCase)
        metrics_repo = await unit_env.get(CommentMetricsRepository)
        post, _ = await _seed_scenario(unit_env)
        metrics_repo.fail_with = RuntimeError("metrics down")

        response = await use_case.execute(
            GetHierarchicalCommentsRequest(
                post_id=str(post.id), sort=CommentSort.BEST, viewer=VIEWER
            )
        )

        assert len(response.comments) == 2
        assert all(item.metrics.view_count == 0 for item in response.comments)

    @pytest.mark.asyncio
    async def test_every_returned_comment_is_viewed(self, unit_env):
        """View tracking covers the whole returned tree."""
        use_case = await unit_env.get(GetHierarchicalCommentsUseCase)
        view_tracker = await unit_env.get(ViewTracker)
        interaction_repo = await unit_env.get(InteractionRepository)
        post, (a, b, c, d, e) = await _seed_scenario(unit_env)

        await use_case.execute(
            GetHierarchicalCommentsRequest(
                post_id=str(post.id), max_depth=2, viewer=VIEWER
            )
        )
        await view_tracker.drain()

        viewed = {i.comment_id for i in interaction_repo.all}
        assert viewed == {a.id, b.id, c.id, d.id}
        assert all(
            i.interaction_type == InteractionType.VIEW for i in interaction_repo.all
        )

    @pytest.mark.asyncio
    async def test_metadata_echoes_request(self, unit_env):
        """algorithm_metadata reports the effective settings."""
        use_case = await unit_env.get(GetHierarchicalCommentsUseCase)
        post, _ = await _seed_scenario(unit_env)

        response = await use_case.execute(
            GetHierarchicalCommentsRequest(
                post_id=str(post.id),
                sort=CommentSort.TRENDING,
                max_depth=3,
                load_all_replies=True,
                viewer=VIEWER,
            )
        )

        metadata = response.algorithm_metadata
        assert metadata.sort_method == CommentSort.TRENDING
        assert metadata.max_depth == 3
        assert metadata.load_all_replies is True
        assert response.total_count == 5
