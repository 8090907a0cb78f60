"""Revoke vote use case."""

from uuid import UUID

from pydantic import BaseModel

from askboard.domain.service import VoteService
from askboard.domain.value import UserId, VoteId


class RevokeVoteRequest(BaseModel):
    """Revoke vote request."""

    vote_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RevokeVoteResponse(BaseModel):
    """Revoke vote response."""

    message: str
    total_votes: int


class RevokeVoteUseCase:
    """Use case for removing one of the user's votes by ID."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize revoke vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RevokeVoteRequest) -> RevokeVoteResponse:
        """Execute revoke vote flow.

        Args:
            request: Revoke vote request

        Returns:
            Confirmation and the item's updated tally

        Raises:
            NotFoundError: If the vote doesn't exist
            NotAuthorizedError: If the vote belongs to another user
        """
        total_votes = await self.vote_service.revoke_vote(
            VoteId(UUID(request.vote_id)), UserId(UUID(request.user_id))
        )

        return RevokeVoteResponse(
            message="Vote removed successfully",
            total_votes=total_votes,
        )
