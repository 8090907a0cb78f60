"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, StrictInt, field_validator

from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    RevokeVoteRequest,
    RevokeVoteResponse,
    RevokeVoteUseCase,
)
from askboard.domain.value import VotableType
from askboard.interface.api.auth import bearer_scheme, require_user

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    votable_id: UUID
    votable_type: VotableType | None = None
    vote_type: StrictInt  # true and 1.0 are rejected

    @field_validator("vote_type")
    @classmethod
    def validate_direction(cls, v: int) -> int:
        if v not in (1, -1):
            raise ValueError("vote_type must be 1 or -1")
        return v


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CastVoteResponse:
    """Vote on a question or answer.

    Voting the same direction twice removes the vote, voting the opposite
    direction flips it. ``votable_type`` may be omitted, in which case the
    item is looked up among questions and then answers.

    Example:
        POST /api/votes
        {"votable_id": "...", "votable_type": "question", "vote_type": 1}

        Response:
        {"votable_id": "...", "votable_type": "question",
         "new_vote_type": 1, "total_votes": 3, "vote_id": "..."}
    """
    user = await require_user(credentials, get_current_user_use_case)

    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_id=str(request.votable_id),
            votable_type=request.votable_type,
            vote_type=request.vote_type,
            user_id=user.id,
        )
    )


@router.delete("/{vote_id}", response_model=RevokeVoteResponse)
async def revoke_vote(
    vote_id: UUID,
    revoke_vote_use_case: FromDishka[RevokeVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RevokeVoteResponse:
    """Withdraw one of your votes.

    Raises:
        NotFoundError: If the vote doesn't exist (404)
        NotAuthorizedError: If the vote belongs to someone else (403)
    """
    user = await require_user(credentials, get_current_user_use_case)

    return await revoke_vote_use_case.execute(
        RevokeVoteRequest(vote_id=str(vote_id), user_id=user.id)
    )
