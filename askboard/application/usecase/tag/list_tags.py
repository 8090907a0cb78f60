"""List tags use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel

from askboard.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    id: str
    name: str
    color: str
    description: str | None
    usage_count: int
    created_at: datetime


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing tags with their usage."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            All tags, most used first, then by name
        """
        with logfire.span("list_tags.execute"):
            usages = await self.tag_service.get_tags_with_usage()

            # Convert to response items
            tag_items = [
                TagItem(
                    id=str(usage.tag.id),
                    name=usage.tag.name.root,
                    color=usage.tag.color,
                    description=usage.tag.description,
                    usage_count=usage.usage_count,
                    created_at=usage.tag.created_at,
                )
                for usage in usages
            ]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
