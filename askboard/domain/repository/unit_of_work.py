"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Atomic scope for a sequence of repository writes.

    Every write made through the request's repositories inside
    ``transaction()`` is applied together, or not at all if the block
    raises. The exception is re-raised after the rollback.

    Usage:
        async with unit_of_work.transaction():
            await vote_repository.save(vote)
            await question_repository.apply_vote_delta(question_id, 1)
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an all-or-nothing transaction scope."""
        pass
