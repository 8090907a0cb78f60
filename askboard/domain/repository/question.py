"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askboard.domain.model.question import Question
from askboard.domain.value import QuestionId, TagName


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, question_id: QuestionId, lock: bool = False
    ) -> Optional[Question]:
        """Find a question by ID, including its tag names.

        Args:
            question_id: The question's unique identifier
            lock: Hold FOR UPDATE on the row until the end of the transaction,
                so no vote can be cast on it meanwhile

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, question_id: QuestionId, lock: bool = False) -> bool:
        """Check whether a question exists.

        Args:
            question_id: The question's unique identifier
            lock: Hold a key-share lock on the row until the end of the
                transaction, so it cannot be deleted underneath the caller

        Returns:
            True if the question exists
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tag: Optional[TagName] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions, newest first.

        Args:
            tag: Only questions carrying this tag
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count questions, optionally filtered by tag.

        Args:
            tag: Only count questions carrying this tag

        Returns:
            Number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Title, content, updated_at and tags are written. Tag links are
        replaced wholesale: all existing links are deleted, then the
        question's current tags are inserted.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question.

        Tag links and answers go with it (foreign key cascade).

        Args:
            question_id: The question ID to delete

        Returns:
            True if a question was deleted
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Atomically increment a question's view counter.

        Args:
            question_id: Question ID

        Returns:
            New view count, or None if the question doesn't exist
        """
        pass

    @abstractmethod
    async def apply_vote_delta(
        self, question_id: QuestionId, delta: int
    ) -> Optional[int]:
        """Atomically add ``delta`` to a question's vote tally.

        Expressed as a single relative update (``votes = votes + delta``),
        never as a read followed by a write.

        Args:
            question_id: Question ID
            delta: Signed amount to add

        Returns:
            New tally, or None if the question doesn't exist
        """
        pass
