"""Domain value objects for Askboard.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from askboard.domain.value.common import RootValueObject


class VoteType(int, Enum):
    """Direction of a vote.

    The integer value is the vote's contribution to the target's tally.
    """

    UP = 1
    DOWN = -1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Must be lowercase, alphanumeric with hyphens, dots, pluses or hashes,
    1-30 characters.
    Examples: 'python', 'node.js', 'c++', 'c#'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9][a-z0-9.+#-]{0,29}$", v):
            raise ValueError(
                "Tag name must be 1-30 characters, lowercase, "
                "alphanumeric with '-', '.', '+' or '#'"
            )
        return v


class Username(RootValueObject[str]):
    """Public username chosen at registration."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is 3-50 word characters."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters: letters, digits, '_', '.' or '-'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address used to log in.

    Stored lowercased so lookups are case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate basic email shape."""
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v) or len(v) > 255:
            raise ValueError("Invalid email address")
        return v
