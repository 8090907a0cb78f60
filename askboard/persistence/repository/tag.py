"""PostgreSQL implementation of Tag repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model.tag import Tag, TagUsage
from askboard.domain.repository import TagRepository
from askboard.domain.value import TagName
from askboard.persistence.mappers import row_to_tag
from askboard.persistence.tables import question_tags_table, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]

    async def find_all_with_usage(self) -> list[TagUsage]:
        """Find all tags with usage counts, most used first."""
        usage_count = func.count(question_tags_table.c.question_id).label(
            "usage_count"
        )
        stmt = (
            select(tags_table, usage_count)
            .select_from(tags_table)
            .outerjoin(question_tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .group_by(tags_table.c.id)
            .order_by(usage_count.desc(), tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [
            TagUsage(tag=row_to_tag(row._asdict()), usage_count=row.usage_count)
            for row in rows
        ]

    async def count_active(self) -> int:
        """Count tags used by at least one question."""
        stmt = select(func.count(func.distinct(question_tags_table.c.tag_id)))
        result = await self.session.execute(stmt)
        return result.scalar() or 0
