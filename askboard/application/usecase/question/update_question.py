"""Update question use case."""

import logfire
from uuid import UUID

from pydantic import BaseModel, Field

from askboard.application.usecase.common import QuestionItem, to_question_item
from askboard.domain.service import AnswerService, QuestionService, TagService, UserService
from askboard.domain.value import QuestionId, TagName, UserId


class UpdateQuestionRequest(BaseModel):
    """Update question request."""

    question_id: str
    user_id: str  # User ID from authenticated user
    title: str
    content: str
    tag_names: list[str] = Field(min_length=1)


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionItem:
        """Execute update question flow.

        Args:
            request: Update question request

        Returns:
            The updated question

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user isn't the author
            ValidationError: If a tag doesn't exist
        """
        question_id = QuestionId(UUID(request.question_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_question.execute",
            question_id=request.question_id,
            user_id=request.user_id,
        ):
            tag_names = [TagName(name) for name in dict.fromkeys(request.tag_names)]
            await self.tag_service.validate_tags_exist(tag_names)

            updated = await self.question_service.update_question(
                question_id,
                user_id,
                title=request.title,
                content=request.content,
                tag_names=tag_names,
            )

            authors = await self.user_service.get_by_ids([updated.author_id])
            resolved = await self.answer_service.get_resolved_question_ids([question_id])

            return to_question_item(
                updated,
                authors.get(updated.author_id),
                has_accepted_answer=question_id in resolved,
            )
