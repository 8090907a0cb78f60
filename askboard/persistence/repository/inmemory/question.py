"""In-memory question repository for testing."""

from typing import Optional

from askboard.domain.model.question import Question
from askboard.domain.repository.question import QuestionRepository
from askboard.domain.value import QuestionId, TagName

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(
        self, question_id: QuestionId, lock: bool = False
    ) -> Optional[Question]:
        """Find a question by ID (locks are a no-op here)."""
        return self._store.questions.get(question_id)

    async def exists(self, question_id: QuestionId, lock: bool = False) -> bool:
        """Check whether a question exists (locks are a no-op here)."""
        return question_id in self._store.questions

    def _matching(self, tag: Optional[TagName]) -> list[Question]:
        questions = list(self._store.questions.values())
        if tag is not None:
            questions = [q for q in questions if tag in q.tag_names]
        return questions

    async def find_all(
        self,
        tag: Optional[TagName] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions newest first."""
        questions = self._matching(tag)
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count questions, optionally filtered by tag."""
        return len(self._matching(tag))

    async def save(self, question: Question) -> Question:
        """Save a question, keeping stored counters on update."""
        existing = self._store.questions.get(question.id)
        if existing:
            question = question.model_copy(
                update={"views": existing.views, "votes": existing.votes}
            )
        self._store.questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and, like the foreign key cascade, its answers."""
        if self._store.questions.pop(question_id, None) is None:
            return False

        for answer_id in [
            a.id for a in self._store.answers.values() if a.question_id == question_id
        ]:
            del self._store.answers[answer_id]
        return True

    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Increment a question's view counter."""
        question = self._store.questions.get(question_id)
        if not question:
            return None
        updated = question.model_copy(update={"views": question.views + 1})
        self._store.questions[question_id] = updated
        return updated.views

    async def apply_vote_delta(
        self, question_id: QuestionId, delta: int
    ) -> Optional[int]:
        """Add ``delta`` to a question's vote tally."""
        question = self._store.questions.get(question_id)
        if not question:
            return None
        updated = question.model_copy(update={"votes": question.votes + delta})
        self._store.questions[question_id] = updated
        return updated.votes
