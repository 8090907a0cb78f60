"""Answer acceptance domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from askboard.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from askboard.domain.model import Answer
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
)
from askboard.domain.value import AnswerId, UserId

from .base import Service


class AcceptanceService(Service):
    """Marks the accepted answer of a question.

    A question has at most one accepted answer. Accepting another answer
    supersedes the previous one; there is no way to unaccept.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize acceptance service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            unit_of_work: Transaction scope shared with the repositories
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.unit_of_work = unit_of_work

    async def accept(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        """Accept an answer on behalf of the question's author.

        Clears the flag on every accepted answer of the question, then sets
        it on ``answer_id``, in one unit of work.

        Args:
            answer_id: Answer to accept
            user_id: Requesting user, who must be the question's author

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer or its question doesn't exist
            NotAuthorizedError: If the user didn't ask the question
            ConflictError: If another acceptance on the question ran concurrently
        """
        with logfire.span(
            "acceptance_service.accept", answer_id=str(answer_id), user_id=str(user_id)
        ):
            try:
                async with self.unit_of_work.transaction():
                    # Check if answer exists
                    answer = await self.answer_repository.find_by_id(answer_id)
                    if not answer:
                        logfire.warn("Accept of non-existent answer", answer_id=str(answer_id))
                        raise NotFoundError("Answer", str(answer_id))

                    question = await self.question_repository.find_by_id(
                        answer.question_id
                    )
                    if not question:
                        raise NotFoundError("Question", str(answer.question_id))

                    # Only the question's author may accept
                    if question.author_id != user_id:
                        logfire.warn(
                            "Accept by non-author",
                            answer_id=str(answer_id),
                            question_id=str(question.id),
                            user_id=str(user_id),
                        )
                        raise NotAuthorizedError(
                            "question",
                            str(question.id),
                            str(user_id),
                            action="accept answers on",
                        )

                    # Clear any previous acceptance, then flag this answer
                    cleared = await self.answer_repository.clear_accepted(question.id)
                    accepted = await self.answer_repository.mark_accepted(answer_id)
                    if accepted is None:
                        raise NotFoundError("Answer", str(answer_id))
            except IntegrityError:
                logfire.warn("Concurrent acceptance", answer_id=str(answer_id))
                raise ConflictError("Acceptance changed concurrently, please retry")

            logfire.info(
                "Answer accepted",
                answer_id=str(answer_id),
                question_id=str(accepted.question_id),
                previously_accepted=cleared,
            )
            return accepted
