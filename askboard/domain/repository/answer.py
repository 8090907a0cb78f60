"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from askboard.domain.model.answer import Answer
from askboard.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, answer_id: AnswerId, lock: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier
            lock: Hold FOR UPDATE on the row until the end of the transaction,
                so no vote can be cast on it meanwhile

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, answer_id: AnswerId, lock: bool = False) -> bool:
        """Check whether an answer exists.

        Args:
            answer_id: The answer's unique identifier
            lock: Hold a key-share lock on the row until the end of the
                transaction, so it cannot be deleted underneath the caller

        Returns:
            True if the answer exists
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question.

        Ordered accepted first, then by votes descending, then oldest first.

        Args:
            question_id: The question's ID

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def find_ids_by_question(
        self, question_id: QuestionId, lock: bool = False
    ) -> list[AnswerId]:
        """List the IDs of all answers to a question.

        Args:
            question_id: The question's ID
            lock: Hold FOR UPDATE on the answer rows until the end of the
                transaction

        Returns:
            List of answer IDs
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update content).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer.

        Args:
            answer_id: The answer ID to delete

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def apply_vote_delta(self, answer_id: AnswerId, delta: int) -> Optional[int]:
        """Atomically add ``delta`` to an answer's vote tally.

        Args:
            answer_id: Answer ID
            delta: Signed amount to add

        Returns:
            New tally, or None if the answer doesn't exist
        """
        pass

    @abstractmethod
    async def clear_accepted(self, question_id: QuestionId) -> int:
        """Unmark every accepted answer of a question.

        Args:
            question_id: The question's ID

        Returns:
            Number of answers that were unmarked
        """
        pass

    @abstractmethod
    async def mark_accepted(self, answer_id: AnswerId) -> Optional[Answer]:
        """Mark an answer as accepted.

        Args:
            answer_id: The answer's ID

        Returns:
            The updated answer, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def count_questions_with_accepted(self) -> int:
        """Count distinct questions that have an accepted answer.

        Returns:
            Number of resolved questions
        """
        pass

    @abstractmethod
    async def find_resolved_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Find which of the given questions have an accepted answer (batch query).

        Args:
            question_ids: Question IDs to check

        Returns:
            Subset of the IDs whose question has an accepted answer
        """
        pass
