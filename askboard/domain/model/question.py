"""Question aggregate root.

Questions are the primary content type in Askboard. They collect answers,
votes and views, and are categorized with tags.
"""

from datetime import datetime

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import QuestionId, TagName, UserId


class Question(DomainModel):
    """Question aggregate root.

    Only the author may edit title, content and tags. ``views`` and ``votes``
    are maintained by the system; ``votes`` is a cached sum of the vote
    ledger for this question.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=30000)
    author_id: UserId
    tag_names: list[TagName] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    votes: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
