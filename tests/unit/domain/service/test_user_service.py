"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from featurevote.domain.error import NotFoundError
from featurevote.domain.repository import UserRepository
from featurevote.domain.service import UserService
from featurevote.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUserLookups:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_user_by_email_returns_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        assert await user_service.get_user_by_email("alice@example.com") == user

    @pytest.mark.asyncio
    async def test_get_user_by_email_returns_none_when_missing(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_user_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_get_by_email_raises_when_missing(self, unit_env):
        """The strict lookup turns a missing user into NotFoundError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found: nobody@example.com"):
            await user_service.get_by_email("nobody@example.com")

    @pytest.mark.asyncio
    async def test_get_by_id_raises_when_missing(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_users_by_ids_skips_unknown(self, unit_env):
        """Batch loading returns only users that exist."""
        user_service = await unit_env.get(UserService)
        alice = await user_service.save(make_user())
        bob = await user_service.save(make_user("bob@example.com", "Bob Smith"))

        users = await user_service.get_users_by_ids([alice.id, bob.id, UserId(uuid4())])

        assert users == {alice.id: alice, bob.id: bob}
