"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from askboard.domain.error import AuthenticationError, NotFoundError
from askboard.domain.service import JWTService, UserService
from askboard.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    id: str
    username: str
    email: str
    avatar_url: str | None
    reputation: int
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for resolving a bearer token to the authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Extract user_id from token
        3. Load user from database

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid or expired
            AuthenticationError: If the token names no known user
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)

        try:
            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        except (NotFoundError, ValueError):
            raise AuthenticationError("Not authorized, user not found")

        return GetCurrentUserResponse(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            avatar_url=user.avatar_url,
            reputation=user.reputation,
            created_at=user.created_at,
        )
