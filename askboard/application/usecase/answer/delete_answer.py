"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from askboard.domain.service import AnswerService
from askboard.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user


class DeleteAnswerUseCase:
    """Use case for deleting an answer and its votes."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> None:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user isn't the author
        """
        await self.answer_service.delete_answer(
            AnswerId(UUID(request.answer_id)), UserId(UUID(request.user_id))
        )
