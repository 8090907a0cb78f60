"""Tag repository interface."""

from abc import ABC, abstractmethod

from askboard.domain.model.tag import Tag, TagUsage
from askboard.domain.value import TagName


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_all_with_usage(self) -> list[TagUsage]:
        """Find all tags with the number of questions using each.

        Ordered by usage descending, then by name.

        Returns:
            List of tags with usage counts
        """
        pass

    @abstractmethod
    async def count_active(self) -> int:
        """Count tags used by at least one question.

        Returns:
            Number of active tags
        """
        pass
