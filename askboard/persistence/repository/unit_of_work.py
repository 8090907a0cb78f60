"""PostgreSQL implementation of the unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work over the request's database session.

    Each ``transaction()`` is a savepoint inside the request transaction,
    so a failed block rolls back its own writes and leaves the session
    usable. The request-scoped session provider commits the outer
    transaction when the request succeeds.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
