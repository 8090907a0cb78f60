"""Shared state behind the in-memory repositories."""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from askboard.domain.model import Answer, Question, Tag, User, Vote
from askboard.domain.value import AnswerId, QuestionId, TagId, TagName, UserId, VoteId

# Same catalogue as the seed migration
DEFAULT_TAGS: list[tuple[str, str, str]] = [
    ("javascript", "#f7df1e", "Questions about JavaScript"),
    ("python", "#3776ab", "Questions about Python"),
    ("react", "#61dafb", "Questions about React"),
    ("node.js", "#339933", "Questions about Node.js"),
    ("sql", "#336791", "Questions about SQL and databases"),
    ("css", "#1572b6", "Questions about CSS and styling"),
    ("html", "#e34f26", "Questions about HTML"),
    ("typescript", "#3178c6", "Questions about TypeScript"),
]


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    Models are immutable, so a snapshot only copies the dicts.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    questions: dict[QuestionId, Question] = field(default_factory=dict)
    answers: dict[AnswerId, Answer] = field(default_factory=dict)
    votes: dict[VoteId, Vote] = field(default_factory=dict)
    tags: dict[TagId, Tag] = field(default_factory=dict)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def snapshot(self) -> dict[str, dict]:
        """Copy every table."""
        return {
            "users": dict(self.users),
            "questions": dict(self.questions),
            "answers": dict(self.answers),
            "votes": dict(self.votes),
            "tags": dict(self.tags),
        }

    def restore(self, snapshot: dict[str, dict]) -> None:
        """Put every table back as it was in ``snapshot``."""
        for name, table in snapshot.items():
            current = getattr(self, name)
            current.clear()
            current.update(table)

    def seed_tags(self) -> None:
        """Insert the default tag catalogue."""
        now = datetime.now()
        for name, color, description in DEFAULT_TAGS:
            tag = Tag(
                id=TagId(uuid4()),
                name=TagName(name),
                color=color,
                description=description,
                created_at=now,
            )
            self.tags[tag.id] = tag
