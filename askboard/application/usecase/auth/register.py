"""Register use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from askboard.domain.service import JWTService, UserService
from askboard.domain.value import Email, Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = Field(min_length=3, max_length=50)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """bcrypt only reads the first 72 bytes."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return v


class RegisteredUser(BaseModel):
    """Newly registered user."""

    id: str
    username: str
    email: str


class RegisterResponse(BaseModel):
    """Register response."""

    message: str
    token: str
    user: RegisteredUser


class RegisterUseCase:
    """Use case for creating an account with a password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Steps:
        1. Validate username and email format
        2. Create user with hashed password (via UserService)
        3. Issue a JWT for the new user

        Args:
            request: Register request

        Returns:
            Register response with token and user summary

        Raises:
            pydantic.ValidationError: If username or email is malformed
            ConflictError: If username or email is already taken
        """
        username = Username(request.username)
        email = Email(request.email)

        with logfire.span("register.execute", username=username.root):
            user = await self.user_service.register(username, email, request.password)
            token = self.jwt_service.create_token(str(user.id), user.username.root)

            return RegisterResponse(
                message="User registered successfully",
                token=token,
                user=RegisteredUser(
                    id=str(user.id),
                    username=user.username.root,
                    email=user.email.root,
                ),
            )
