"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Question
from askboard.domain.repository import QuestionRepository
from askboard.domain.value import QuestionId, TagName
from askboard.persistence.mappers import question_to_dict, row_to_question
from askboard.persistence.tables import (
    question_tags_table,
    questions_table,
    tags_table,
)


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_questions(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> list of tag names
        """
        if not question_ids:
            return {}

        stmt = (
            select(question_tags_table.c.question_id, tags_table.c.name)
            .select_from(question_tags_table)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(question_tags_table.c.question_id.in_(question_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()

        # Build lookup: question_id -> [tag_names]
        tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in rows:
            tag_map[row.question_id].append(row.name)

        return tag_map

    async def find_by_id(
        self, question_id: QuestionId, lock: bool = False
    ) -> Optional[Question]:
        """Find a question by ID, optionally locking it FOR UPDATE."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        if lock:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            return None

        tag_map = await self._fetch_tags_for_questions([question_id])
        return row_to_question(row._asdict(), tag_names=tag_map.get(question_id, []))

    async def exists(self, question_id: QuestionId, lock: bool = False) -> bool:
        """Check whether a question exists, optionally holding FOR KEY SHARE."""
        stmt = select(questions_table.c.id).where(questions_table.c.id == question_id)
        if lock:
            stmt = stmt.with_for_update(read=True, key_share=True)
        result = await self.session.execute(stmt)
        return result.scalar() is not None

    def _filter_by_tag(self, stmt, tag: TagName):
        return (
            stmt.join(
                question_tags_table,
                questions_table.c.id == question_tags_table.c.question_id,
            )
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(tags_table.c.name == tag.root)
        )

    async def find_all(
        self,
        tag: Optional[TagName] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions newest first, with optional tag filter."""
        with logfire.span(
            "question_repository.find_all",
            tag=tag.root if tag else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(questions_table).select_from(questions_table)
            if tag:
                stmt = self._filter_by_tag(stmt, tag)

            stmt = (
                stmt.order_by(desc(questions_table.c.created_at), questions_table.c.id)
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            rows = result.fetchall()

            if not rows:
                return []

            # Fetch tags for all questions in a single query
            tag_map = await self._fetch_tags_for_questions([row.id for row in rows])
            return [
                row_to_question(row._asdict(), tag_names=tag_map.get(row.id, []))
                for row in rows
            ]

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count questions, optionally filtered by tag."""
        stmt = select(func.count()).select_from(questions_table)
        if tag:
            stmt = self._filter_by_tag(stmt, tag)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update) and replace its tag links."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            tags=[t.root for t in question.tag_names],
        ):
            if await self.exists(question.id):
                # Counters are maintained by their own relative updates
                stmt = (
                    update(questions_table)
                    .where(questions_table.c.id == question.id)
                    .values(
                        title=question.title,
                        content=question.content,
                        updated_at=question.updated_at,
                    )
                )
                await self.session.execute(stmt)

                await self.session.execute(
                    delete(question_tags_table).where(
                        question_tags_table.c.question_id == question.id
                    )
                )
            else:
                stmt = insert(questions_table).values(**question_to_dict(question))
                await self.session.execute(stmt)

            if question.tag_names:
                tag_lookup = select(tags_table.c.id).where(
                    tags_table.c.name.in_([tag.root for tag in question.tag_names])
                )
                tag_ids = (await self.session.execute(tag_lookup)).scalars().all()
                if tag_ids:
                    await self.session.execute(
                        insert(question_tags_table),
                        [{"question_id": question.id, "tag_id": tid} for tid in tag_ids],
                    )

            await self.session.flush()
            saved = await self.find_by_id(question.id)
            return saved or question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question (answers and tag links cascade)."""
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Atomically increment a question's view counter."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
            .returning(questions_table.c.views)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def apply_vote_delta(
        self, question_id: QuestionId, delta: int
    ) -> Optional[int]:
        """Atomically add ``delta`` to a question's vote tally."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(votes=questions_table.c.votes + delta)
            .returning(questions_table.c.votes)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
