"""Unit tests for the in-memory store and unit of work."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from askboard.domain.value import UserId
from askboard.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from tests.conftest import make_answer, make_question, make_user


class TestInMemoryUnitOfWork:
    """Tests for InMemoryUnitOfWork."""

    @pytest.mark.asyncio
    async def test_failure_rolls_back_every_table(self):
        """Writes inside a failed transaction disappear."""
        # Arrange
        store = InMemoryStore()
        uow = InMemoryUnitOfWork(store)
        questions = InMemoryQuestionRepository(store)
        answers = InMemoryAnswerRepository(store)
        kept = await questions.save(make_question(UserId(uuid4())))

        # Act
        with pytest.raises(RuntimeError):
            async with uow.transaction():
                await answers.save(make_answer(kept.id, UserId(uuid4())))
                await questions.apply_vote_delta(kept.id, 5)
                raise RuntimeError("boom")

        # Assert
        assert await answers.find_by_question(kept.id) == []
        assert (await questions.find_by_id(kept.id)).votes == 0

    @pytest.mark.asyncio
    async def test_nested_failure_keeps_outer_writes(self):
        """A failed inner transaction only undoes its own writes."""
        # Arrange
        store = InMemoryStore()
        uow = InMemoryUnitOfWork(store)
        questions = InMemoryQuestionRepository(store)
        author = UserId(uuid4())

        # Act
        async with uow.transaction():
            outer = await questions.save(make_question(author, title="Outer question"))
            with pytest.raises(RuntimeError):
                async with uow.transaction():
                    await questions.save(make_question(author, title="Inner question"))
                    raise RuntimeError("boom")

        # Assert
        assert [q.id for q in await questions.find_all(None, 10, 0)] == [outer.id]

    @pytest.mark.asyncio
    async def test_tasks_sharing_one_unit_of_work_do_not_interleave(self):
        """Two tasks on the same unit of work take turns on the store."""
        # Arrange
        store = InMemoryStore()
        uow = InMemoryUnitOfWork(store)
        events = []

        async def work(name):
            async with uow.transaction():
                events.append(f"{name} start")
                await asyncio.sleep(0)
                await asyncio.sleep(0)
                events.append(f"{name} end")

        # Act
        await asyncio.gather(work("a"), work("b"))

        # Assert
        assert events in (
            ["a start", "a end", "b start", "b end"],
            ["b start", "b end", "a start", "a end"],
        )

    @pytest.mark.asyncio
    async def test_failure_in_one_task_keeps_other_task_writes(self):
        """A rollback in one task never undoes another task's commit."""
        # Arrange
        store = InMemoryStore()
        uow = InMemoryUnitOfWork(store)
        questions = InMemoryQuestionRepository(store)
        author = UserId(uuid4())

        async def succeed():
            async with uow.transaction():
                await asyncio.sleep(0)
                return await questions.save(make_question(author, title="Kept question"))

        async def fail():
            async with uow.transaction():
                await questions.save(make_question(author, title="Lost question"))
                await asyncio.sleep(0)
                raise RuntimeError("boom")

        # Act
        kept, failure = await asyncio.gather(succeed(), fail(), return_exceptions=True)

        # Assert
        assert isinstance(failure, RuntimeError)
        assert [q.id for q in await questions.find_all(None, 10, 0)] == [kept.id]


class TestInMemoryConstraints:
    """The in-memory repositories enforce the same uniqueness as the schema."""

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_integrity_error(self):
        store = InMemoryStore()
        users = InMemoryUserRepository(store)
        await users.save(make_user("alice"))

        with pytest.raises(IntegrityError):
            await users.save(make_user("alice"))

    @pytest.mark.asyncio
    async def test_answer_to_missing_question_raises_integrity_error(self):
        store = InMemoryStore()
        answers = InMemoryAnswerRepository(store)

        with pytest.raises(IntegrityError):
            await answers.save(make_answer(uuid4(), UserId(uuid4())))

    @pytest.mark.asyncio
    async def test_second_accepted_answer_raises_integrity_error(self):
        """Only one answer per question may carry the flag."""
        # Arrange
        store = InMemoryStore()
        questions = InMemoryQuestionRepository(store)
        answers = InMemoryAnswerRepository(store)
        question = await questions.save(make_question(UserId(uuid4())))
        first = await answers.save(make_answer(question.id, UserId(uuid4())))
        second = await answers.save(make_answer(question.id, UserId(uuid4())))
        await answers.mark_accepted(first.id)

        # Act & Assert
        with pytest.raises(IntegrityError):
            await answers.mark_accepted(second.id)
