"""Unit tests for the register, login and current-user use cases."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from askboard.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from askboard.domain.error import AuthenticationError, ConflictError
from askboard.domain.service import JWTService
from askboard.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _register_request(**overrides) -> RegisterRequest:
    fields = {"username": "alice", "email": "alice@example.com", "password": "secret123"}
    fields.update(overrides)
    return RegisterRequest(**fields)


class TestRegister:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token_for_new_user(self, unit_env):
        """The issued token names the new user."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(_register_request())

        # Assert
        assert response.user.username == "alice"
        assert response.user.email == "alice@example.com"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.user.id
        assert payload.username == "alice"

    @pytest.mark.asyncio
    async def test_taken_username_raises_conflict(self, unit_env):
        """A second account with the same username is refused."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        await use_case.execute(_register_request())

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(_register_request(email="other@example.com"))

    def test_short_password_is_rejected(self):
        """Passwords need at least six characters."""
        with pytest.raises(PydanticValidationError):
            _register_request(password="12345")

    def test_password_over_72_bytes_is_rejected(self):
        """bcrypt would silently truncate longer passwords."""
        with pytest.raises(PydanticValidationError):
            _register_request(password="é" * 40)

    @pytest.mark.asyncio
    async def test_malformed_email_is_rejected(self, unit_env):
        """Email format is checked before anything is stored."""
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(PydanticValidationError):
            await use_case.execute(_register_request(email="not-an-email"))


class TestLogin:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_registered_credentials(self, unit_env):
        """Registered users can log in and use the token."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)
        registered = await register.execute(_register_request())

        # Act
        response = await login.execute(
            LoginRequest(email="ALICE@example.com", password="secret123")
        )
        me = await current_user.execute(GetCurrentUserRequest(token=response.token))

        # Assert
        assert me.id == registered.user.id
        assert me.reputation == 0

    @pytest.mark.asyncio
    async def test_wrong_password_raises(self, unit_env):
        """A wrong password fails authentication."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(_register_request())

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await login.execute(
                LoginRequest(email="alice@example.com", password="wrong-password")
            )

    @pytest.mark.asyncio
    async def test_malformed_email_raises_authentication_error(self, unit_env):
        """A malformed email is treated like an unknown one."""
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(email="nope", password="secret123"))

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env):
        """Garbage tokens don't resolve to a user."""
        current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await current_user.execute(GetCurrentUserRequest(token="not-a-jwt"))
