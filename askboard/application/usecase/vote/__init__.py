"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .revoke_vote import RevokeVoteRequest, RevokeVoteResponse, RevokeVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "RevokeVoteRequest",
    "RevokeVoteResponse",
    "RevokeVoteUseCase",
]
