"""Tag entity for categorizing questions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity for categorizing questions.

    Tags are seeded by migration; questions reference them by name.
    """

    id: TagId
    name: TagName  # Unique
    color: str = Field(default="#6b7280", pattern=r"^#[0-9a-fA-F]{6}$")
    description: Optional[str] = Field(default=None, max_length=200)
    created_at: datetime = Field(default_factory=datetime.now)


class TagUsage(DomainModel):
    """A tag together with the number of questions using it."""

    tag: Tag
    usage_count: int = Field(ge=0)
