"""Create question use case."""

import logfire
from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from askboard.application.usecase.common import QuestionItem, to_question_item
from askboard.domain.model import Question
from askboard.domain.service import QuestionService, TagService, UserService
from askboard.domain.value import QuestionId, TagName, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    content: str
    tag_names: list[str] = Field(min_length=1)
    author_id: str  # User ID from authenticated user


class CreateQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionItem:
        """Execute create question flow.

        Steps:
        1. Load the author (via UserService)
        2. Validate that all tags exist (via TagService)
        3. Create Question entity (validation happens in domain model)
        4. Save question and tag links (via QuestionService)

        Args:
            request: Create question request

        Returns:
            The created question

        Raises:
            NotFoundError: If the author is unknown
            ValidationError: If a tag doesn't exist
        """
        author_id = UserId(UUID(request.author_id))
        author = await self.user_service.get_by_id(author_id)

        with logfire.span(
            "create_question.execute",
            title=request.title,
            tags=request.tag_names,
            author=author.username.root,
        ):
            # Deduplicate while keeping the caller's order
            tag_names = [TagName(name) for name in dict.fromkeys(request.tag_names)]
            await self.tag_service.validate_tags_exist(tag_names)

            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=request.title,
                content=request.content,
                author_id=author_id,
                tag_names=tag_names,
                views=0,
                votes=0,
                created_at=now,
                updated_at=now,
            )

            saved = await self.question_service.save_question(question)

            logfire.info("Question created successfully", question_id=str(saved.id))

            return to_question_item(saved, author, has_accepted_answer=False)
