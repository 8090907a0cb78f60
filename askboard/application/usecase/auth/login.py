"""Login use case."""

import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from askboard.domain.error import AuthenticationError
from askboard.domain.service import JWTService, UserService
from askboard.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """Login response."""

    message: str
    token: str


class LoginUseCase:
    """Use case for logging in with email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Login response with a fresh token

        Raises:
            AuthenticationError: If the credentials don't match a user
        """
        with logfire.span("login.execute"):
            try:
                email = Email(request.email)
            except PydanticValidationError:
                # A malformed email can't belong to anyone
                raise AuthenticationError("Invalid credentials")

            user = await self.user_service.authenticate(email, request.password)
            token = self.jwt_service.create_token(str(user.id), user.username.root)

            return LoginResponse(message="Logged in successfully", token=token)
