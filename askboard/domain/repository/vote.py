"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from askboard.domain.model.vote import Vote
from askboard.domain.value import UserId, VotableType, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId, lock: bool = False) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier
            lock: Lock the row for update until the end of the transaction

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        lock: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (question or answer)
            votable_id: ID of the item
            lock: Lock the row for update until the end of the transaction

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> List[Vote]:
        """Find all votes on a specific item.

        Not used by the request path. Kept for auditing the ledger, e.g.
        checking that an item's tally matches its votes.

        Args:
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            List of votes on the item
        """
        pass

    @abstractmethod
    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            votable_type: Type of items (question or answer)
            votable_ids: List of item IDs to check

        Returns:
            List of votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        This may raise an error if a vote already exists for this
        user/votable combination (unique constraint violation).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        pass

    @abstractmethod
    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Change the direction of an existing vote in place.

        Args:
            vote_id: The vote ID
            vote_type: New direction

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted
        """
        pass

    @abstractmethod
    async def delete_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> int:
        """Delete every vote on the given items.

        Used when the items themselves are deleted.

        Args:
            votable_type: Type of items (question or answer)
            votable_ids: IDs of the items

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def sum_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> int:
        """Sum the directions of all votes on an item.

        This is the authoritative value the cached tally must match. Not
        used by the request path. Kept for checking that invariant.

        Args:
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            Net vote total
        """
        pass
