"""Unit tests for MetricsService."""

from uuid import uuid4

import pytest

from roost.domain.repository import CommentMetricsRepository
from roost.domain.service import MetricsService
from roost.domain.value import CommentId
from tests.conftest import make_metrics
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLookup:
    """Tests for lookup."""

    @pytest.mark.asyncio
    async def test_returns_known_rows_only(self, unit_env):
        """Comments without a metrics row are absent from the result."""
        metrics_service = await unit_env.get(MetricsService)
        metrics_repo = await unit_env.get(CommentMetricsRepository)

        known, unknown = CommentId(uuid4()), CommentId(uuid4())
        await metrics_repo.save(make_metrics(known, score=2.5, view_count=4))

        result = await metrics_service.lookup([known, unknown])

        assert set(result) == {known}
        assert result[known].view_count == 4

    @pytest.mark.asyncio
    async def test_store_failure_degrades_to_no_metrics(self, unit_env):
        """A failing store yields an empty mapping."""
        metrics_service = await unit_env.get(MetricsService)
        metrics_repo = await unit_env.get(CommentMetricsRepository)
        metrics_repo.fail_with = RuntimeError("metrics store down")

        result = await metrics_service.lookup([CommentId(uuid4())])

        assert result == {}
