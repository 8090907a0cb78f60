"""Accept answer use case."""

import logfire
from uuid import UUID

from pydantic import BaseModel

from askboard.application.usecase.common import AnswerItem, to_answer_item
from askboard.domain.service import AcceptanceService, UserService
from askboard.domain.value import AnswerId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user


class AcceptAnswerUseCase:
    """Use case for the question author accepting an answer."""

    def __init__(
        self, acceptance_service: AcceptanceService, user_service: UserService
    ) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance domain service
            user_service: User domain service
        """
        self.acceptance_service = acceptance_service
        self.user_service = user_service

    async def execute(self, request: AcceptAnswerRequest) -> AnswerItem:
        """Execute accept answer flow.

        Args:
            request: Accept answer request

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer doesn't exist
            NotAuthorizedError: If the user didn't ask the question
        """
        with logfire.span("accept_answer.execute", answer_id=request.answer_id):
            accepted = await self.acceptance_service.accept(
                AnswerId(UUID(request.answer_id)), UserId(UUID(request.user_id))
            )
            authors = await self.user_service.get_by_ids([accepted.author_id])
            return to_answer_item(accepted, authors.get(accepted.author_id))
