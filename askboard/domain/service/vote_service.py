"""Vote domain service.

The vote ledger: each user holds at most one vote per question or answer,
and every item's ``votes`` column is kept equal to the sum of the votes
pointing at it. Each operation writes the ledger and the tally inside one
unit of work.

Lock order, for every operation that touches a tally:

1. the voted item (key-share lock, blocks its deletion)
2. the user's existing vote row (update lock)
3. the tally (relative ``UPDATE ... RETURNING``)
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from askboard.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from askboard.domain.model.vote import Vote
from askboard.domain.repository import UnitOfWork, VoteRepository
from askboard.domain.value import UserId, VotableType, VoteId, VoteType

from .base import Service
from .votable_registry import VotableRegistry


@dataclass(frozen=True)
class VoteOutcome:
    """Result of casting a vote.

    ``new_vote_type`` is the user's stance after the call: 1, -1, or 0 when
    the call toggled an existing vote off, in which case ``vote_id`` is None.
    """

    votable_id: UUID
    votable_type: VotableType
    new_vote_type: int
    total_votes: int
    vote_id: VoteId | None = None


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        votable_registry: VotableRegistry,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            votable_registry: Registry resolving questions and answers
            unit_of_work: Transaction scope shared with the repositories
        """
        self.vote_repository = vote_repository
        self.votable_registry = votable_registry
        self.unit_of_work = unit_of_work

    async def cast_vote(
        self,
        user_id: UserId,
        votable_id: UUID,
        vote_type: VoteType,
        votable_type: VotableType | None = None,
    ) -> VoteOutcome:
        """Cast, toggle off, or flip a user's vote on an item.

        - No existing vote: a vote is created, tally moves by ``vote_type``
        - Existing vote in the same direction: it is removed, tally moves back
        - Existing vote in the other direction: it is flipped, tally moves by 2

        Args:
            user_id: Voting user
            votable_id: Question or answer ID
            vote_type: Direction of the vote
            votable_type: Kind of the item, looked up when omitted

        Returns:
            The user's new stance and the item's updated tally

        Raises:
            NotFoundError: If the item doesn't exist
            ConflictError: If a concurrent first vote by the same user won
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            votable_id=str(votable_id),
            vote_type=vote_type.value,
        ):
            # Look up the kind when the caller didn't name it
            if votable_type is None:
                votable_type = await self.votable_registry.resolve(votable_id)

            try:
                async with self.unit_of_work.transaction():
                    # Check if item exists, and keep it from being deleted
                    if not await self.votable_registry.exists(
                        votable_type, votable_id, lock=True
                    ):
                        logfire.warn(
                            "Vote on non-existent item",
                            votable_type=votable_type.value,
                            votable_id=str(votable_id),
                        )
                        raise NotFoundError(
                            votable_type.value.capitalize(), str(votable_id)
                        )

                    # Lock the user's current vote, if any
                    existing = await self.vote_repository.find_by_user_and_votable(
                        user_id, votable_type, votable_id, lock=True
                    )

                    if existing is None:
                        # Create vote (will raise IntegrityError if duplicate)
                        vote_id = VoteId(uuid4())
                        await self.vote_repository.save(
                            Vote(
                                id=vote_id,
                                user_id=user_id,
                                votable_type=votable_type,
                                votable_id=votable_id,
                                vote_type=vote_type,
                                created_at=datetime.now(),
                            )
                        )
                        delta = vote_type.value
                        new_vote_type = vote_type.value
                    elif existing.vote_type == vote_type:
                        await self.vote_repository.delete(existing.id)
                        vote_id = None
                        delta = -existing.vote_type.value
                        new_vote_type = 0
                    else:
                        await self.vote_repository.update_vote_type(
                            existing.id, vote_type
                        )
                        vote_id = existing.id
                        delta = vote_type.value - existing.vote_type.value
                        new_vote_type = vote_type.value

                    # Atomically update the item's tally
                    total_votes = await self.votable_registry.apply_delta(
                        votable_type, votable_id, delta
                    )
            except IntegrityError:
                logfire.warn(
                    "Concurrent duplicate vote",
                    user_id=str(user_id),
                    votable_id=str(votable_id),
                )
                raise ConflictError("Vote changed concurrently, please retry")

            logfire.info(
                "Vote cast",
                user_id=str(user_id),
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                delta=delta,
                total_votes=total_votes,
            )
            return VoteOutcome(
                votable_id=votable_id,
                votable_type=votable_type,
                new_vote_type=new_vote_type,
                total_votes=total_votes,
                vote_id=vote_id,
            )

    async def revoke_vote(self, vote_id: VoteId, user_id: UserId) -> int:
        """Remove one of the user's own votes by its ID.

        Args:
            vote_id: Vote to remove
            user_id: Requesting user, who must own the vote

        Returns:
            The voted item's updated tally

        Raises:
            NotFoundError: If the vote or its item doesn't exist
            NotAuthorizedError: If the vote belongs to another user
        """
        with logfire.span(
            "vote_service.revoke_vote", vote_id=str(vote_id), user_id=str(user_id)
        ):
            async with self.unit_of_work.transaction():
                vote = await self.vote_repository.find_by_id(vote_id)
                if not vote:
                    logfire.warn("Revoke of non-existent vote", vote_id=str(vote_id))
                    raise NotFoundError("Vote", str(vote_id))

                if vote.user_id != user_id:
                    logfire.warn(
                        "Revoke of another user's vote",
                        vote_id=str(vote_id),
                        user_id=str(user_id),
                    )
                    raise NotAuthorizedError(
                        "vote", str(vote_id), str(user_id), action="revoke"
                    )

                if not await self.votable_registry.exists(
                    vote.votable_type, vote.votable_id, lock=True
                ):
                    raise NotFoundError(
                        vote.votable_type.value.capitalize(), str(vote.votable_id)
                    )

                # Re-read under lock, a concurrent toggle may have removed it
                locked = await self.vote_repository.find_by_id(vote_id, lock=True)
                if not locked:
                    raise NotFoundError("Vote", str(vote_id))

                await self.vote_repository.delete(locked.id)
                total_votes = await self.votable_registry.apply_delta(
                    locked.votable_type, locked.votable_id, -locked.vote_type.value
                )

            logfire.info(
                "Vote revoked",
                vote_id=str(vote_id),
                votable_type=locked.votable_type.value,
                votable_id=str(locked.votable_id),
                total_votes=total_votes,
            )
            return total_votes

    async def get_user_votes(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: list[UUID],
    ) -> dict[UUID, Vote]:
        """Find the user's votes on several items of one kind.

        Args:
            user_id: User ID
            votable_type: Kind of the items
            votable_ids: Item IDs to check

        Returns:
            Mapping of item ID to the user's vote, for voted items only
        """
        if not votable_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_votables(
            user_id=user_id,
            votable_type=votable_type,
            votable_ids=votable_ids,
        )
        return {vote.votable_id: vote for vote in votes}
