"""Question use cases."""

from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    MAX_PAGE,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PaginationInfo,
)
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase

__all__ = [
    "MAX_PAGE",
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "PaginationInfo",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
]
