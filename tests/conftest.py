"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from askboard.domain.model import Answer, Question, User
from askboard.domain.value import (
    AnswerId,
    Email,
    QuestionId,
    TagName,
    UserId,
    Username,
)

# Spans and events stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "alice") -> User:
    """Build a user with a placeholder password hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(f"{username}@example.com"),
        password_hash="not-a-real-hash",
    )


def make_question(
    author_id: UserId,
    title: str = "How do I reverse a list?",
    tags: list[str] | None = None,
    age: timedelta = timedelta(0),
) -> Question:
    """Build a question; ``age`` moves its creation time into the past."""
    created_at = datetime.now() - age
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        content="I tried a loop but it feels clumsy.",
        author_id=author_id,
        tag_names=[TagName(t) for t in (tags or ["python"])],
        created_at=created_at,
        updated_at=created_at,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    content: str = "Use slicing: items[::-1]",
    age: timedelta = timedelta(0),
) -> Answer:
    """Build an answer; ``age`` moves its creation time into the past."""
    created_at = datetime.now() - age
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content=content,
        created_at=created_at,
        updated_at=created_at,
    )
