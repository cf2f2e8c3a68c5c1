"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from roost.domain.error import NotFoundError
from roost.domain.repository import UserRepository
from roost.domain.service import UserService
from roost.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        """Known users are returned."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("grace", first_name="Grace", last_name="Hopper")
        await user_repo.save(user)

        found = await user_service.get_by_id(user.id)

        assert found == user
        assert found.full_name == "Grace Hopper"

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        """Unknown users raise NotFoundError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_authors_dedupes_and_skips_unknown(self, unit_env):
        """Duplicate IDs collapse; unknown authors are absent."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("heidi")
        await user_repo.save(user)
        unknown = UserId(uuid4())

        authors = await user_service.get_authors([user.id, user.id, unknown])

        assert authors == {user.id: user}

    @pytest.mark.asyncio
    async def test_get_authors_empty(self, unit_env):
        """No IDs, no lookup."""
        user_service = await unit_env.get(UserService)

        assert await user_service.get_authors([]) == {}
