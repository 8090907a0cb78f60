"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from askboard.domain.service import QuestionService
from askboard.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # User ID from authenticated user


class DeleteQuestionUseCase:
    """Use case for deleting a question with its answers and votes."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Execute delete question flow.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user isn't the author
        """
        await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), UserId(UUID(request.user_id))
        )
