"""Domain value objects for Askboard."""

from askboard.domain.value.identifiers import (
    AnswerId,
    QuestionId,
    TagId,
    UserId,
    VoteId,
)
from askboard.domain.value.types import (
    Email,
    TagName,
    Username,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    "TagId",
    # Types
    "Email",
    "TagName",
    "Username",
    "VoteType",
    "VotableType",
]
