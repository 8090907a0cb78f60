"""Password hashing domain service."""

import bcrypt
import logfire

from askboard.config import AuthSettings

from .base import Service


class PasswordService(Service):
    """Hashes and verifies user passwords with bcrypt."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.auth_settings = auth_settings

    def hash_password(self, password: str) -> str:
        """Hash a clear-text password.

        Args:
            password: Clear-text password (at most 72 bytes once encoded)

        Returns:
            bcrypt hash as text
        """
        with logfire.span("password_service.hash_password"):
            salt = bcrypt.gensalt(rounds=self.auth_settings.bcrypt_rounds)
            return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a clear-text password against a stored hash."""
        with logfire.span("password_service.verify_password"):
            try:
                return bcrypt.checkpw(
                    password.encode("utf-8"), password_hash.encode("utf-8")
                )
            except ValueError as e:
                # Malformed stored hash or over-long password
                logfire.warn("Password verification failed", error=str(e))
                return False
