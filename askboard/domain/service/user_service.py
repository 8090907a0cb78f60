"""User domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from askboard.domain.error import AuthenticationError, ConflictError, NotFoundError
from askboard.domain.model import User
from askboard.domain.repository import UserRepository
from askboard.domain.value import Email, UserId, Username

from .base import Service
from .password_service import PasswordService


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Get several users at once, keyed by ID.

        Missing users are simply absent from the result.
        """
        if not user_ids:
            return {}
        return await self.user_repository.find_by_ids(list(set(user_ids)))

    async def register(self, username: Username, email: Email, password: str) -> User:
        """Register a new user.

        Args:
            username: Desired username
            email: Email address used to log in
            password: Clear-text password, hashed before storage

        Returns:
            Created user

        Raises:
            ConflictError: If the username or email is already taken
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise ConflictError("Username or email already exists")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already taken", username=username.root)
                raise ConflictError("Username or email already exists")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=self.password_service.hash_password(password),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race against a concurrent registration
                logfire.warn("Duplicate registration", username=username.root)
                raise ConflictError("Username or email already exists")

            logfire.info("User registered", user_id=str(saved.id), username=username.root)
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check login credentials.

        Args:
            email: Email address
            password: Clear-text password

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Login for unknown email")
                raise AuthenticationError("Invalid credentials")

            if not self.password_service.verify_password(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise AuthenticationError("Invalid credentials")

            logfire.info("User authenticated", user_id=str(user.id))
            return user
