"""List answers use case."""

import logfire
from uuid import UUID

from pydantic import BaseModel

from askboard.application.usecase.common import AnswerItem, to_answer_item
from askboard.domain.service import AnswerService, UserService, VoteService
from askboard.domain.value import QuestionId, UserId, VotableType


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerItem]


class ListAnswersUseCase:
    """Use case for listing a question's answers."""

    def __init__(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
            vote_service: Vote domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Args:
            request: List answers request

        Returns:
            Answers, accepted first, then by votes, then oldest first

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question_id = QuestionId(UUID(request.question_id))

        with logfire.span("list_answers.execute", question_id=request.question_id):
            answers = await self.answer_service.list_answers(question_id)

            # Batch lookups to avoid N+1 queries
            authors = await self.user_service.get_by_ids([a.author_id for a in answers])
            user_votes = {}
            if request.user_id:
                user_votes = await self.vote_service.get_user_votes(
                    UserId(UUID(request.user_id)),
                    VotableType.ANSWER,
                    [a.id for a in answers],
                )

            return ListAnswersResponse(
                answers=[
                    to_answer_item(a, authors.get(a.author_id), user_votes.get(a.id))
                    for a in answers
                ]
            )
