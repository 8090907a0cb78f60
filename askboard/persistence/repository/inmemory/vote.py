"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from askboard.domain.model.vote import Vote
from askboard.domain.repository.vote import VoteRepository
from askboard.domain.value import UserId, VotableType, VoteId, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._votes = store.votes

    async def find_by_id(self, vote_id: VoteId, lock: bool = False) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._votes.get(vote_id)

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        lock: bool = False,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        votable_uuid = UUID(str(votable_id))
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_uuid
            ):
                return vote
        return None

    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> list[Vote]:
        """Find all votes for a votable item (ledger audits only)."""
        votable_uuid = UUID(str(votable_id))
        return [
            v
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id == votable_uuid
        ]

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items."""
        wanted = {UUID(str(vid)) for vid in votable_ids}
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on this item
        """
        # Same rule as the unique_vote constraint
        votable_uuid = UUID(str(vote.votable_id))
        for other in self._votes.values():
            if (
                other.id != vote.id
                and other.user_id == vote.user_id
                and other.votable_type == vote.votable_type
                and other.votable_id == votable_uuid
            ):
                raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[vote.id] = vote
        return vote

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Change the direction of a vote."""
        updated = self._votes[vote_id].model_copy(update={"vote_type": vote_type})
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        return self._votes.pop(vote_id, None) is not None

    async def delete_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> int:
        """Delete every vote on the given items."""
        wanted = {UUID(str(vid)) for vid in votable_ids}
        doomed = [
            v.id
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id in wanted
        ]
        for vote_id in doomed:
            del self._votes[vote_id]
        return len(doomed)

    async def sum_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> int:
        """Sum the directions of all votes on an item (ledger audits only)."""
        votes = await self.find_by_votable(votable_type, votable_id)
        return sum(int(v.vote_type) for v in votes)
