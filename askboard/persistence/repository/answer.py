"""PostgreSQL implementation of Answer repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Answer
from askboard.domain.repository import AnswerRepository
from askboard.domain.value import AnswerId, QuestionId
from askboard.persistence.mappers import answer_to_dict, row_to_answer
from askboard.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, answer_id: AnswerId, lock: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID, optionally locking it FOR UPDATE."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        if lock:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def exists(self, answer_id: AnswerId, lock: bool = False) -> bool:
        """Check whether an answer exists, optionally holding FOR KEY SHARE."""
        stmt = select(answers_table.c.id).where(answers_table.c.id == answer_id)
        if lock:
            stmt = stmt.with_for_update(read=True, key_share=True)
        result = await self.session.execute(stmt)
        return result.scalar() is not None

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find a question's answers, accepted first, then by votes, then oldest."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(
                desc(answers_table.c.is_accepted),
                desc(answers_table.c.votes),
                answers_table.c.created_at,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def find_ids_by_question(
        self, question_id: QuestionId, lock: bool = False
    ) -> list[AnswerId]:
        """Find the IDs of a question's answers, optionally locking them."""
        stmt = select(answers_table.c.id).where(
            answers_table.c.question_id == question_id
        )
        if lock:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return [AnswerId(answer_id) for answer_id in result.scalars().all()]

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update content)."""
        if await self.exists(answer.id):
            # Tally and acceptance are maintained by their own updates
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(content=answer.content, updated_at=answer.updated_at)
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_answer(row._asdict()) if row else answer

        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def apply_vote_delta(self, answer_id: AnswerId, delta: int) -> Optional[int]:
        """Atomically add ``delta`` to an answer's vote tally."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(votes=answers_table.c.votes + delta)
            .returning(answers_table.c.votes)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def clear_accepted(self, question_id: QuestionId) -> int:
        """Clear the accepted flag on every answer of a question."""
        stmt = (
            update(answers_table)
            .where(
                answers_table.c.question_id == question_id,
                answers_table.c.is_accepted.is_(True),
            )
            .values(is_accepted=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def mark_accepted(self, answer_id: AnswerId) -> Optional[Answer]:
        """Set the accepted flag on one answer."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=True)
            .returning(answers_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def count_questions_with_accepted(self) -> int:
        """Count questions that have an accepted answer."""
        stmt = select(func.count(func.distinct(answers_table.c.question_id))).where(
            answers_table.c.is_accepted.is_(True)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_resolved_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Find which of the given questions have an accepted answer."""
        if not question_ids:
            return set()

        stmt = (
            select(answers_table.c.question_id)
            .where(
                answers_table.c.question_id.in_(list(question_ids)),
                answers_table.c.is_accepted.is_(True),
            )
            .distinct()
        )
        result = await self.session.execute(stmt)
        return {QuestionId(qid) for qid in result.scalars().all()}
