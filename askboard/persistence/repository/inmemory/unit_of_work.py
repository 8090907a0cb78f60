"""In-memory unit of work for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from askboard.domain.repository import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work that restores a snapshot of the store on failure.

    Each task's outermost transaction holds the store lock, so concurrent
    transactions run one after the other even when they share this unit
    of work. Nested transactions only snapshot.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        # Nesting depth per task
        self._depth: dict[asyncio.Task | None, int] = {}

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        task = asyncio.current_task()
        if self._depth.get(task):
            async with self._rollback_on_error(task):
                yield
            return

        async with self.store.lock:
            async with self._rollback_on_error(task):
                yield

    @asynccontextmanager
    async def _rollback_on_error(self, task: asyncio.Task | None) -> AsyncIterator[None]:
        snapshot = self.store.snapshot()
        self._depth[task] = self._depth.get(task, 0) + 1
        try:
            yield
        except BaseException:
            self.store.restore(snapshot)
            raise
        finally:
            self._depth[task] -= 1
            if not self._depth[task]:
                del self._depth[task]
