"""Question domain service."""

from datetime import datetime

import logfire

from askboard.domain.error import NotAuthorizedError, NotFoundError
from askboard.domain.model import Question
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
    VoteRepository,
)
from askboard.domain.value import QuestionId, TagName, UserId, VotableType

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            vote_repository: Vote repository
            unit_of_work: Transaction scope shared with the repositories
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository
        self.unit_of_work = unit_of_work

    async def save_question(self, question: Question) -> Question:
        """Save a question together with its tag links.

        Args:
            question: Question to save

        Returns:
            Saved question
        """
        with logfire.span(
            "question_service.save_question", question_id=str(question.id)
        ):
            async with self.unit_of_work.transaction():
                saved = await self.question_repository.save(question)
            logfire.info(
                "Question saved", question_id=str(saved.id), tags=len(saved.tag_names)
            )
            return saved

    async def get_question_by_id(
        self, question_id: QuestionId, lock: bool = False
    ) -> Question:
        """Get a question by ID, optionally locking it FOR UPDATE.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(
                question_id, lock=lock
            )
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def view_question(self, question_id: QuestionId) -> Question:
        """Record a view and return the question with its new view count.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.view_question", question_id=str(question_id)):
            # Atomically increment view count
            views = await self.question_repository.increment_views(question_id)
            if views is None:
                logfire.warn("View of non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return await self.get_question_by_id(question_id)

    async def list_questions(
        self, tag: TagName | None, limit: int, offset: int
    ) -> tuple[list[Question], int]:
        """List questions newest first.

        Args:
            tag: Optional tag filter
            limit: Page size
            offset: Number of questions to skip

        Returns:
            The page of questions and the total number of matches
        """
        with logfire.span(
            "question_service.list_questions",
            tag=tag.root if tag else None,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                tag=tag, limit=limit, offset=offset
            )
            total = await self.question_repository.count(tag=tag)
            return questions, total

    async def count_questions(self) -> int:
        """Count all questions."""
        return await self.question_repository.count()

    async def update_question(
        self,
        question_id: QuestionId,
        user_id: UserId,
        title: str,
        content: str,
        tag_names: list[TagName],
    ) -> Question:
        """Edit a question's title, content and tags.

        Tags are replaced wholesale in the same unit of work.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            async with self.unit_of_work.transaction():
                question = await self.get_question_by_id(question_id)
                if question.author_id != user_id:
                    logfire.warn(
                        "Unauthorized question edit",
                        question_id=str(question_id),
                        user_id=str(user_id),
                    )
                    raise NotAuthorizedError("question", str(question_id), str(user_id))

                # Re-validate so edits obey the same rules as new questions
                updated = Question.model_validate(
                    {
                        **question.model_dump(),
                        "title": title,
                        "content": content,
                        "tag_names": tag_names,
                        "updated_at": datetime.now(),
                    }
                )
                saved = await self.question_repository.save(updated)

            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def delete_question(self, question_id: QuestionId, user_id: UserId) -> None:
        """Delete a question with its answers and every vote on either.

        Votes have no foreign key to their item, so they are removed
        explicitly; answers follow the question by cascade.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            async with self.unit_of_work.transaction():
                # Lock the question first so no vote lands on it meanwhile
                question = await self.get_question_by_id(question_id, lock=True)
                if question.author_id != user_id:
                    logfire.warn(
                        "Unauthorized question delete",
                        question_id=str(question_id),
                        user_id=str(user_id),
                    )
                    raise NotAuthorizedError(
                        "question", str(question_id), str(user_id), action="delete"
                    )

                # Then its answers, before their votes are cleared
                answer_ids = await self.answer_repository.find_ids_by_question(
                    question_id, lock=True
                )
                answer_votes = await self.vote_repository.delete_by_votables(
                    VotableType.ANSWER, answer_ids
                )
                # Votes have no foreign key, answers go by cascade
                question_votes = await self.vote_repository.delete_by_votables(
                    VotableType.QUESTION, [question_id]
                )
                await self.question_repository.delete(question_id)

            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answers=len(answer_ids),
                votes=answer_votes + question_votes,
            )
