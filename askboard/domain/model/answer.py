"""Answer entity."""

from datetime import datetime

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    Business rules:
    - Content is editable by the answer's author, even once accepted
    - ``is_accepted`` is set only by the question's author
    - At most one answer per question is accepted at a time
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=30000)
    votes: int = 0
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
