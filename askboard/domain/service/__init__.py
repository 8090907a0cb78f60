"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService
from .votable_registry import VotableRegistry
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "JWTService",
    "PasswordService",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
    "VotableRegistry",
    "VoteOutcome",
    "VoteService",
]
