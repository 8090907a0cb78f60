"""Bearer token authentication for routes."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from askboard.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from askboard.domain.error import AuthenticationError
from askboard.util.jwt import JWTError

# Missing credentials are reported by the handlers below, not by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


async def require_user(
    credentials: HTTPAuthorizationCredentials | None,
    get_current_user_use_case: GetCurrentUserUseCase,
) -> GetCurrentUserResponse:
    """Resolve the bearer token to the current user.

    Args:
        credentials: ``Authorization: Bearer`` credentials, if sent
        get_current_user_use_case: Get current user use case

    Returns:
        The authenticated user

    Raises:
        AuthenticationError: If no token was sent or its user is gone
        JWTError: If the token is invalid or expired
    """
    if credentials is None:
        raise AuthenticationError("Authentication required")

    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=credentials.credentials)
    )


async def optional_user_id(
    credentials: HTTPAuthorizationCredentials | None,
    get_current_user_use_case: GetCurrentUserUseCase,
) -> str | None:
    """Resolve the bearer token if present, ignoring bad tokens.

    Used by read endpoints that personalize their output.
    """
    if credentials is None:
        return None

    try:
        user = await require_user(credentials, get_current_user_use_case)
    except (AuthenticationError, JWTError):
        return None
    return user.id
