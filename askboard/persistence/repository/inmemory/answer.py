"""In-memory answer repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from askboard.domain.model.answer import Answer
from askboard.domain.repository.answer import AnswerRepository
from askboard.domain.value import AnswerId, QuestionId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(
        self, answer_id: AnswerId, lock: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID (locks are a no-op here)."""
        return self._store.answers.get(answer_id)

    async def exists(self, answer_id: AnswerId, lock: bool = False) -> bool:
        """Check whether an answer exists (locks are a no-op here)."""
        return answer_id in self._store.answers

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find a question's answers, accepted first, then by votes, then oldest."""
        answers = [
            a for a in self._store.answers.values() if a.question_id == question_id
        ]
        answers.sort(key=lambda a: (not a.is_accepted, -a.votes, a.created_at))
        return answers

    async def find_ids_by_question(
        self, question_id: QuestionId, lock: bool = False
    ) -> list[AnswerId]:
        """Find the IDs of a question's answers."""
        return [
            a.id for a in self._store.answers.values() if a.question_id == question_id
        ]

    async def save(self, answer: Answer) -> Answer:
        """Save an answer, keeping stored tally and acceptance on update.

        Raises:
            IntegrityError: If the question doesn't exist (foreign key)
        """
        if answer.question_id not in self._store.questions:
            raise IntegrityError("Unknown question", None, Exception())

        existing = self._store.answers.get(answer.id)
        if existing:
            answer = answer.model_copy(
                update={"votes": existing.votes, "is_accepted": existing.is_accepted}
            )
        self._store.answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._store.answers.pop(answer_id, None) is not None

    async def apply_vote_delta(self, answer_id: AnswerId, delta: int) -> Optional[int]:
        """Add ``delta`` to an answer's vote tally."""
        answer = self._store.answers.get(answer_id)
        if not answer:
            return None
        updated = answer.model_copy(update={"votes": answer.votes + delta})
        self._store.answers[answer_id] = updated
        return updated.votes

    async def clear_accepted(self, question_id: QuestionId) -> int:
        """Clear the accepted flag on every answer of a question."""
        cleared = 0
        for answer in list(self._store.answers.values()):
            if answer.question_id == question_id and answer.is_accepted:
                self._store.answers[answer.id] = answer.model_copy(
                    update={"is_accepted": False}
                )
                cleared += 1
        return cleared

    async def mark_accepted(self, answer_id: AnswerId) -> Optional[Answer]:
        """Set the accepted flag on one answer.

        Raises:
            IntegrityError: If another answer of the question is accepted
        """
        answer = self._store.answers.get(answer_id)
        if not answer:
            return None

        for other in self._store.answers.values():
            if (
                other.id != answer_id
                and other.question_id == answer.question_id
                and other.is_accepted
            ):
                raise IntegrityError("Two accepted answers", None, Exception())

        updated = answer.model_copy(update={"is_accepted": True})
        self._store.answers[answer_id] = updated
        return updated

    async def count_questions_with_accepted(self) -> int:
        """Count questions that have an accepted answer."""
        return len(
            {a.question_id for a in self._store.answers.values() if a.is_accepted}
        )

    async def find_resolved_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Find which of the given questions have an accepted answer."""
        wanted = set(question_ids)
        return {
            a.question_id
            for a in self._store.answers.values()
            if a.is_accepted and a.question_id in wanted
        }
