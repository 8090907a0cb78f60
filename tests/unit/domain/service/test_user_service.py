"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from askboard.domain.error import AuthenticationError, ConflictError, NotFoundError
from askboard.domain.service import UserService
from askboard.domain.value import Email, UserId, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for UserService.register()."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored hash is never the clear-text password."""
        # Arrange
        service = await unit_env.get(UserService)

        # Act
        user = await service.register(
            Username("alice"), Email("Alice@Example.com"), "secret123"
        )

        # Assert
        assert user.password_hash != "secret123"
        assert user.email.root == "alice@example.com"
        assert user.reputation == 0
        assert (await service.get_by_id(user.id)).username.root == "alice"

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_conflict(self, unit_env):
        """Usernames are unique."""
        # Arrange
        service = await unit_env.get(UserService)
        await service.register(Username("alice"), Email("alice@example.com"), "secret123")

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.register(
                Username("alice"), Email("other@example.com"), "secret123"
            )

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, unit_env):
        """Emails are unique regardless of case."""
        # Arrange
        service = await unit_env.get(UserService)
        await service.register(Username("alice"), Email("alice@example.com"), "secret123")

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.register(Username("bob"), Email("ALICE@example.com"), "secret123")


class TestAuthenticate:
    """Tests for UserService.authenticate()."""

    @pytest.mark.asyncio
    async def test_correct_password_returns_user(self, unit_env):
        """Matching credentials authenticate."""
        # Arrange
        service = await unit_env.get(UserService)
        user = await service.register(
            Username("alice"), Email("alice@example.com"), "secret123"
        )

        # Act
        authenticated = await service.authenticate(Email("alice@example.com"), "secret123")

        # Assert
        assert authenticated.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password_raises(self, unit_env):
        """A wrong password is rejected."""
        # Arrange
        service = await unit_env.get(UserService)
        await service.register(Username("alice"), Email("alice@example.com"), "secret123")

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await service.authenticate(Email("alice@example.com"), "wrong-password")

    @pytest.mark.asyncio
    async def test_unknown_email_raises(self, unit_env):
        """Unknown emails are rejected the same way."""
        service = await unit_env.get(UserService)

        with pytest.raises(AuthenticationError):
            await service.authenticate(Email("nobody@example.com"), "secret123")


class TestGetById:
    """Tests for UserService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        """Unknown IDs fail."""
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))
