"""User aggregate root.

Users register with a username, email and password, and carry a
reputation counter reserved for community engagement.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import Email, UserId, Username


class User(DomainModel):
    """User aggregate root.

    The password is never stored in clear; only its bcrypt hash.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    avatar_url: Optional[str] = None
    reputation: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
