"""Answer domain service."""

from datetime import datetime
from typing import Sequence

import logfire

from askboard.domain.error import NotAuthorizedError, NotFoundError
from askboard.domain.model import Answer
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
    VoteRepository,
)
from askboard.domain.value import AnswerId, QuestionId, UserId, VotableType

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            vote_repository: Vote repository
            unit_of_work: Transaction scope shared with the repositories
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.vote_repository = vote_repository
        self.unit_of_work = unit_of_work

    async def create_answer(self, answer: Answer) -> Answer:
        """Post an answer to an existing question.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span(
            "answer_service.create_answer",
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
        ):
            async with self.unit_of_work.transaction():
                # Key-share lock keeps the question from vanishing under us
                if not await self.question_repository.exists(
                    answer.question_id, lock=True
                ):
                    logfire.warn(
                        "Answer to non-existent question",
                        question_id=str(answer.question_id),
                    )
                    raise NotFoundError("Question", str(answer.question_id))

                # Create answer
                saved = await self.answer_repository.save(answer)

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(saved.question_id),
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId, lock: bool = False) -> Answer:
        """Get an answer by ID, optionally locking it FOR UPDATE.

        Raises:
            NotFoundError: If answer not found
        """
        answer = await self.answer_repository.find_by_id(answer_id, lock=lock)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def list_answers(self, question_id: QuestionId) -> list[Answer]:
        """List a question's answers, accepted first, then best voted, then oldest.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span("answer_service.list_answers", question_id=str(question_id)):
            if not await self.question_repository.exists(question_id):
                raise NotFoundError("Question", str(question_id))
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers listed", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def update_answer(
        self, answer_id: AnswerId, user_id: UserId, content: str
    ) -> Answer:
        """Edit an answer's content.

        Accepted answers stay editable.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            async with self.unit_of_work.transaction():
                answer = await self.get_answer_by_id(answer_id)
                if answer.author_id != user_id:
                    logfire.warn(
                        "Unauthorized answer edit",
                        answer_id=str(answer_id),
                        user_id=str(user_id),
                    )
                    raise NotAuthorizedError("answer", str(answer_id), str(user_id))

                updated = Answer.model_validate(
                    {
                        **answer.model_dump(),
                        "content": content,
                        "updated_at": datetime.now(),
                    }
                )
                saved = await self.answer_repository.save(updated)

            logfire.info("Answer updated", answer_id=str(answer_id))
            return saved

    async def delete_answer(self, answer_id: AnswerId, user_id: UserId) -> None:
        """Delete an answer and every vote on it.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            async with self.unit_of_work.transaction():
                # Lock the answer first so no vote lands on it meanwhile
                answer = await self.get_answer_by_id(answer_id, lock=True)
                if answer.author_id != user_id:
                    logfire.warn(
                        "Unauthorized answer delete",
                        answer_id=str(answer_id),
                        user_id=str(user_id),
                    )
                    raise NotAuthorizedError(
                        "answer", str(answer_id), str(user_id), action="delete"
                    )

                votes = await self.vote_repository.delete_by_votables(
                    VotableType.ANSWER, [answer_id]
                )
                await self.answer_repository.delete(answer_id)

            logfire.info("Answer deleted", answer_id=str(answer_id), votes=votes)

    async def get_resolved_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Find which of the given questions have an accepted answer."""
        if not question_ids:
            return set()
        return await self.answer_repository.find_resolved_question_ids(question_ids)

    async def count_resolved_questions(self) -> int:
        """Count questions that have an accepted answer."""
        return await self.answer_repository.count_questions_with_accepted()
