"""In-memory tag repository for testing."""

from askboard.domain.model.tag import Tag, TagUsage
from askboard.domain.repository.tag import TagRepository
from askboard.domain.value import TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        wanted = {name.root for name in names}
        return [tag for tag in self._store.tags.values() if tag.name.root in wanted]

    def _usage_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for question in self._store.questions.values():
            for name in question.tag_names:
                counts[name.root] = counts.get(name.root, 0) + 1
        return counts

    async def find_all_with_usage(self) -> list[TagUsage]:
        """Find all tags with usage counts, most used first."""
        counts = self._usage_counts()
        usages = [
            TagUsage(tag=tag, usage_count=counts.get(tag.name.root, 0))
            for tag in self._store.tags.values()
        ]
        usages.sort(key=lambda u: (-u.usage_count, u.tag.name.root))
        return usages

    async def count_active(self) -> int:
        """Count tags used by at least one question."""
        return len(self._usage_counts())
