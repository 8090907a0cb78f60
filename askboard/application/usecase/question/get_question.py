"""Get question use case."""

import logfire
from uuid import UUID

from pydantic import BaseModel

from askboard.application.usecase.common import QuestionItem, to_question_item
from askboard.domain.service import AnswerService, QuestionService, UserService, VoteService
from askboard.domain.value import QuestionId, UserId, VotableType


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionUseCase:
    """Use case for viewing a single question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> QuestionItem:
        """Execute get question flow.

        Each call counts as one view.

        Args:
            request: Get question request

        Returns:
            The question with its new view count

        Raises:
            NotFoundError: If question not found
        """
        question_id = QuestionId(UUID(request.question_id))

        with logfire.span("get_question.execute", question_id=request.question_id):
            question = await self.question_service.view_question(question_id)

            authors = await self.user_service.get_by_ids([question.author_id])
            resolved = await self.answer_service.get_resolved_question_ids([question_id])

            user_vote = None
            if request.user_id:
                votes = await self.vote_service.get_user_votes(
                    UserId(UUID(request.user_id)), VotableType.QUESTION, [question_id]
                )
                user_vote = votes.get(question_id)

            return to_question_item(
                question,
                authors.get(question.author_id),
                has_accepted_answer=question_id in resolved,
                user_vote=user_vote,
            )
