"""Create answer use case."""

import logfire
from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel

from askboard.application.usecase.common import AnswerItem, to_answer_item
from askboard.domain.model import Answer
from askboard.domain.service import AnswerService, UserService
from askboard.domain.value import AnswerId, QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    content: str
    author_id: str  # User ID from authenticated user


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerItem:
        """Execute create answer flow.

        Args:
            request: Create answer request

        Returns:
            The created answer

        Raises:
            NotFoundError: If the question or author doesn't exist
        """
        author_id = UserId(UUID(request.author_id))
        author = await self.user_service.get_by_id(author_id)

        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            author=author.username.root,
        ):
            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=QuestionId(UUID(request.question_id)),
                author_id=author_id,
                content=request.content,
                votes=0,
                is_accepted=False,
                created_at=now,
                updated_at=now,
            )

            saved = await self.answer_service.create_answer(answer)
            return to_answer_item(saved, author)
