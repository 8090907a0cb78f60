"""Vote entity.

Votes are the ledger behind question and answer tallies.
Each user holds at most one vote per item (question or answer).
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import UserId, VotableType, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Represents an upvote or downvote on a question or answer.
    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Casting the same direction again removes the vote
    - Casting the opposite direction flips the vote in place
    - Polymorphic reference to the votable, tagged with its kind
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
