"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel

from askboard.application.usecase.common import AnswerItem, to_answer_item
from askboard.domain.service import AnswerService, UserService
from askboard.domain.value import AnswerId, UserId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user
    content: str


class UpdateAnswerUseCase:
    """Use case for editing an answer."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerItem:
        """Execute update answer flow.

        Args:
            request: Update answer request

        Returns:
            The updated answer

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user isn't the author
        """
        updated = await self.answer_service.update_answer(
            AnswerId(UUID(request.answer_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        authors = await self.user_service.get_by_ids([updated.author_id])
        return to_answer_item(updated, authors.get(updated.author_id))
