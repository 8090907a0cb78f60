"""List questions use case."""

import logfire
import math
from uuid import UUID

from pydantic import BaseModel, Field

from askboard.application.usecase.common import QuestionItem, to_question_item
from askboard.config import PaginationSettings
from askboard.domain.service import AnswerService, QuestionService, UserService, VoteService
from askboard.domain.value import TagName, UserId, VotableType

# Keeps (page - 1) * limit inside a bigint OFFSET
MAX_PAGE = 10_000


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int | None = Field(default=None, ge=1)
    tag: str | None = None  # Filter by tag name
    user_id: str | None = None  # Current user ID (if authenticated)


class PaginationInfo(BaseModel):
    """Pagination details of a listing."""

    total_count: int
    total_pages: int
    current_page: int
    limit: int


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    pagination: PaginationInfo
    questions: list[QuestionItem]


class ListQuestionsUseCase:
    """Use case for listing questions with tag filter and pagination."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        vote_service: VoteService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
            vote_service: Vote domain service
            pagination: Page size defaults and limits
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service
        self.vote_service = vote_service
        self.pagination = pagination

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters and pagination

        Returns:
            One page of questions, newest first
        """
        limit = min(
            request.limit or self.pagination.default_limit, self.pagination.max_limit
        )
        offset = (request.page - 1) * limit

        with logfire.span(
            "list_questions.execute", tag=request.tag, page=request.page, limit=limit
        ):
            # Convert tag string to TagName if provided
            tag_filter = TagName(request.tag) if request.tag else None

            questions, total = await self.question_service.list_questions(
                tag=tag_filter, limit=limit, offset=offset
            )

            # Batch lookups to avoid N+1 queries
            question_ids = [q.id for q in questions]
            authors = await self.user_service.get_by_ids([q.author_id for q in questions])
            resolved = await self.answer_service.get_resolved_question_ids(question_ids)

            user_votes = {}
            if request.user_id:
                user_votes = await self.vote_service.get_user_votes(
                    UserId(UUID(request.user_id)), VotableType.QUESTION, question_ids
                )

            items = [
                to_question_item(
                    q,
                    authors.get(q.author_id),
                    has_accepted_answer=q.id in resolved,
                    user_vote=user_votes.get(q.id),
                )
                for q in questions
            ]

            logfire.info("Questions listed", count=len(items), total=total)

            return ListQuestionsResponse(
                pagination=PaginationInfo(
                    total_count=total,
                    total_pages=math.ceil(total / limit),
                    current_page=request.page,
                    limit=limit,
                ),
                questions=items,
            )
