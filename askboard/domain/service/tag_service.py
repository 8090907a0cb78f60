"""Tag domain service."""

import logfire

from askboard.domain.error import ValidationError
from askboard.domain.model.tag import Tag, TagUsage
from askboard.domain.repository import TagRepository
from askboard.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def validate_tags_exist(self, tag_names: list[TagName]) -> list[Tag]:
        """Validate that all requested tags exist.

        Args:
            tag_names: List of tag names to validate

        Returns:
            List of found tags

        Raises:
            ValidationError: If any tags are not found
        """
        with logfire.span(
            "tag_service.validate_tags_exist", tags=[t.root for t in tag_names]
        ):
            # Batch fetch tags
            tags = await self.tag_repository.find_by_names(tag_names)

            # Check that all requested tags were found
            found_names = {tag.name.root for tag in tags}
            requested_names = {name.root for name in tag_names}
            missing = requested_names - found_names

            if missing:
                logfire.warn("Unknown tags requested", missing=sorted(missing))
                raise ValidationError(f"Tags not found: {', '.join(sorted(missing))}")

            logfire.info("All tags validated", count=len(tags))
            return tags

    async def get_tags_with_usage(self) -> list[TagUsage]:
        """Get all tags with how many questions use each, most used first."""
        with logfire.span("tag_service.get_tags_with_usage"):
            tags = await self.tag_repository.find_all_with_usage()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def count_active_tags(self) -> int:
        """Count tags used by at least one question."""
        return await self.tag_repository.count_active()
