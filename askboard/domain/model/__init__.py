"""Domain model entities for Askboard."""

from askboard.domain.model.answer import Answer
from askboard.domain.model.question import Question
from askboard.domain.model.tag import Tag, TagUsage
from askboard.domain.model.user import User
from askboard.domain.model.vote import Vote

__all__ = [
    "User",
    "Question",
    "Answer",
    "Vote",
    "Tag",
    "TagUsage",
]
