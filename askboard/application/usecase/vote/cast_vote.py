"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel, StrictInt, field_validator

from askboard.domain.service import VoteService
from askboard.domain.value import UserId, VotableType, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_id: str  # UUID string
    votable_type: VotableType | None = None  # Looked up when omitted
    vote_type: StrictInt
    user_id: str  # User ID from authenticated user

    @field_validator("vote_type")
    @classmethod
    def validate_direction(cls, v: int) -> int:
        """Only an upvote or a downvote."""
        if v not in (1, -1):
            raise ValueError("vote_type must be 1 or -1")
        return v


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_id: str
    votable_type: VotableType
    new_vote_type: int  # 1, -1, or 0 when the vote was toggled off
    total_votes: int
    vote_id: str | None


class CastVoteUseCase:
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The user's new stance and the item's tally

        Raises:
            NotFoundError: If the item doesn't exist
            ConflictError: If a concurrent vote by the same user won
        """
        outcome = await self.vote_service.cast_vote(
            user_id=UserId(UUID(request.user_id)),
            votable_id=UUID(request.votable_id),
            vote_type=VoteType(request.vote_type),
            votable_type=request.votable_type,
        )

        return CastVoteResponse(
            votable_id=str(outcome.votable_id),
            votable_type=outcome.votable_type,
            new_vote_type=outcome.new_vote_type,
            total_votes=outcome.total_votes,
            vote_id=str(outcome.vote_id) if outcome.vote_id else None,
        )
