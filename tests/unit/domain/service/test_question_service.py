"""Unit tests for QuestionService."""

import asyncio
from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from askboard.domain.error import NotAuthorizedError, NotFoundError
from askboard.domain.repository import AnswerRepository, VoteRepository
from askboard.domain.service import QuestionService, VoteService
from askboard.domain.value import QuestionId, TagName, UserId, VotableType, VoteType
from tests.conftest import make_answer, make_question
from tests.di import build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListQuestions:
    """Tests for list_questions."""

    @pytest.mark.asyncio
    async def test_newest_first_with_total(self, unit_env):
        """Questions come back newest first; total ignores the page."""
        # Arrange
        service = await unit_env.get(QuestionService)
        author = UserId(uuid4())
        old = await service.save_question(
            make_question(author, title="Old question", age=timedelta(days=2))
        )
        new = await service.save_question(make_question(author, title="New question"))
        await service.save_question(
            make_question(author, title="Middle question", age=timedelta(days=1))
        )

        # Act
        page, total = await service.list_questions(tag=None, limit=2, offset=0)

        # Assert
        assert total == 3
        assert [q.id for q in page][0] == new.id
        assert old.id not in [q.id for q in page]

    @pytest.mark.asyncio
    async def test_tag_filter(self, unit_env):
        """Only questions carrying the tag match."""
        # Arrange
        service = await unit_env.get(QuestionService)
        author = UserId(uuid4())
        tagged = await service.save_question(make_question(author, tags=["sql", "python"]))
        await service.save_question(make_question(author, tags=["css"]))

        # Act
        page, total = await service.list_questions(
            tag=TagName("sql"), limit=10, offset=0
        )

        # Assert
        assert total == 1
        assert [q.id for q in page] == [tagged.id]


class TestViewQuestion:
    """Tests for view_question."""

    @pytest.mark.asyncio
    async def test_each_view_increments_counter(self, unit_env):
        """Every read bumps the view count by one."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = await service.save_question(make_question(UserId(uuid4())))

        # Act
        await service.view_question(question.id)
        viewed = await service.view_question(question.id)

        # Assert
        assert viewed.views == 2

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """Viewing an unknown question fails."""
        service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await service.view_question(QuestionId(uuid4()))


class TestUpdateQuestion:
    """Tests for update_question."""

    @pytest.mark.asyncio
    async def test_author_replaces_title_content_and_tags(self, unit_env):
        """Author edits replace fields and tags wholesale."""
        # Arrange
        service = await unit_env.get(QuestionService)
        author = UserId(uuid4())
        question = await service.save_question(make_question(author, tags=["python"]))

        # Act
        updated = await service.update_question(
            question.id,
            author,
            title="How do I reverse a tuple?",
            content="Tuples are immutable.",
            tag_names=[TagName("sql"), TagName("css")],
        )

        # Assert
        assert updated.title == "How do I reverse a tuple?"
        assert [t.root for t in updated.tag_names] == ["sql", "css"]
        stored = await service.get_question_by_id(question.id)
        assert stored.content == "Tuples are immutable."

    @pytest.mark.asyncio
    async def test_non_author_is_refused(self, unit_env):
        """Only the author may edit."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = await service.save_question(make_question(UserId(uuid4())))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.update_question(
                question.id,
                UserId(uuid4()),
                title="Hijacked title",
                content="Hijacked",
                tag_names=[TagName("python")],
            )

    @pytest.mark.asyncio
    async def test_empty_title_is_rejected(self, unit_env):
        """Edits are validated like new questions."""
        # Arrange
        service = await unit_env.get(QuestionService)
        author = UserId(uuid4())
        question = await service.save_question(make_question(author))

        # Act & Assert
        with pytest.raises(PydanticValidationError):
            await service.update_question(
                question.id, author, title="", content="x", tag_names=[TagName("python")]
            )
        stored = await service.get_question_by_id(question.id)
        assert stored.title == question.title


class TestDeleteQuestion:
    """Tests for delete_question."""

    @pytest.mark.asyncio
    async def test_delete_cascades_answers_and_votes(self, unit_env):
        """Answers and every vote on the question or its answers go with it."""
        # Arrange
        service = await unit_env.get(QuestionService)
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)

        author = UserId(uuid4())
        voter = UserId(uuid4())
        question = await service.save_question(make_question(author))
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        await vote_service.cast_vote(voter, question.id, VoteType.UP)
        await vote_service.cast_vote(voter, answer.id, VoteType.DOWN)

        # Act
        await service.delete_question(question.id, author)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_question_by_id(question.id)
        assert await answer_repo.find_by_id(answer.id) is None
        assert await vote_repo.find_by_votable(VotableType.QUESTION, question.id) == []
        assert await vote_repo.find_by_votable(VotableType.ANSWER, answer.id) == []

    @pytest.mark.asyncio
    async def test_non_author_is_refused(self, unit_env):
        """Someone else's delete leaves the question in place."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = await service.save_question(make_question(UserId(uuid4())))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.delete_question(question.id, UserId(uuid4()))
        assert await service.get_question_by_id(question.id)

    @pytest.mark.asyncio
    async def test_rows_are_locked_before_votes_are_cleared(self, unit_env):
        """The question and its answers are locked before any vote is deleted."""
        # Arrange
        service = await unit_env.get(QuestionService)
        author = UserId(uuid4())
        question = await service.save_question(make_question(author))
        calls = []

        question_find = service.question_repository.find_by_id
        answer_ids = service.answer_repository.find_ids_by_question
        delete_votes = service.vote_repository.delete_by_votables

        async def recording_find(question_id, lock=False):
            calls.append(("question", lock))
            return await question_find(question_id, lock=lock)

        async def recording_ids(question_id, lock=False):
            calls.append(("answers", lock))
            return await answer_ids(question_id, lock=lock)

        async def recording_delete(votable_type, votable_ids):
            calls.append(("votes", votable_type))
            return await delete_votes(votable_type, votable_ids)

        service.question_repository.find_by_id = recording_find
        service.answer_repository.find_ids_by_question = recording_ids
        service.vote_repository.delete_by_votables = recording_delete

        # Act
        await service.delete_question(question.id, author)

        # Assert
        assert calls == [
            ("question", True),
            ("answers", True),
            ("votes", VotableType.ANSWER),
            ("votes", VotableType.QUESTION),
        ]

    @pytest.mark.asyncio
    async def test_vote_racing_delete_leaves_no_orphan(self):
        """A vote cast alongside the delete either fails or is removed with it."""
        # Arrange
        container = build_test_container()
        author = UserId(uuid4())
        async with container() as setup:
            service = await setup.get(QuestionService)
            question = await service.save_question(make_question(author))

        async def delete():
            async with container() as request_container:
                service = await request_container.get(QuestionService)
                await service.delete_question(question.id, author)

        async def vote():
            async with container() as request_container:
                vote_service = await request_container.get(VoteService)
                await vote_service.cast_vote(
                    UserId(uuid4()), question.id, VoteType.UP, VotableType.QUESTION
                )

        # Act
        results = await asyncio.gather(delete(), vote(), return_exceptions=True)

        # Assert
        assert results[0] is None
        assert results[1] is None or isinstance(results[1], NotFoundError)
        async with container() as check:
            vote_repo = await check.get(VoteRepository)
            votes = await vote_repo.find_by_votable(VotableType.QUESTION, question.id)
            assert votes == []
        await container.close()
