"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from askboard.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from askboard.domain.service import VoteService
from askboard.domain.value import UserId, VotableType, VoteId, VoteType
from tests.conftest import make_answer, make_question
from tests.di import build_test_container
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _question(unit_env):
    question_repo = await unit_env.get(QuestionRepository)
    return await question_repo.save(make_question(UserId(uuid4())))


async def _assert_tally_matches_ledger(unit_env, votable_type, votable_id, tally):
    vote_repo = await unit_env.get(VoteRepository)
    assert await vote_repo.sum_by_votable(votable_type, votable_id) == tally


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_first_upvote_creates_vote_and_increments_tally(self, unit_env):
        """A first vote is recorded and moves the tally by its direction."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question = await _question(unit_env)
        user_id = UserId(uuid4())

        # Act
        outcome = await vote_service.cast_vote(
            user_id, question.id, VoteType.UP, VotableType.QUESTION
        )

        # Assert
        assert outcome.new_vote_type == 1
        assert outcome.total_votes == 1
        assert outcome.votable_type == VotableType.QUESTION
        saved = await vote_repo.find_by_user_and_votable(
            user_id, VotableType.QUESTION, question.id
        )
        assert saved is not None
        assert saved.id == outcome.vote_id
        assert saved.vote_type == VoteType.UP

    @pytest.mark.asyncio
    async def test_same_direction_twice_toggles_vote_off(self, unit_env):
        """Upvoting twice restores the tally and leaves no vote row."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question = await _question(unit_env)
        user_id = UserId(uuid4())
        await vote_service.cast_vote(user_id, question.id, VoteType.UP)

        # Act
        outcome = await vote_service.cast_vote(user_id, question.id, VoteType.UP)

        # Assert
        assert outcome.new_vote_type == 0
        assert outcome.total_votes == 0
        assert outcome.vote_id is None
        assert (
            await vote_repo.find_by_user_and_votable(
                user_id, VotableType.QUESTION, question.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_opposite_direction_flips_vote_in_place(self, unit_env):
        """Up then down moves the tally by exactly -2 and keeps one vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question = await _question(unit_env)
        user_id = UserId(uuid4())
        first = await vote_service.cast_vote(user_id, question.id, VoteType.UP)

        # Act
        outcome = await vote_service.cast_vote(user_id, question.id, VoteType.DOWN)

        # Assert
        assert outcome.total_votes == first.total_votes - 2
        assert outcome.new_vote_type == -1
        assert outcome.vote_id == first.vote_id
        votes = await vote_repo.find_by_votable(VotableType.QUESTION, question.id)
        assert len(votes) == 1
        assert votes[0].vote_type == VoteType.DOWN

    @pytest.mark.asyncio
    async def test_votable_type_is_resolved_when_omitted(self, unit_env):
        """Voting without a kind finds the answer by its ID."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await _question(unit_env)
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))

        # Act
        outcome = await vote_service.cast_vote(
            UserId(uuid4()), answer.id, VoteType.DOWN
        )

        # Assert
        assert outcome.votable_type == VotableType.ANSWER
        assert outcome.total_votes == -1
        assert (await answer_repo.find_by_id(answer.id)).votes == -1

    @pytest.mark.asyncio
    async def test_vote_on_missing_item_raises_not_found(self, unit_env):
        """Voting on an unknown ID fails and records nothing."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_id = UserId(uuid4())
        missing_id = uuid4()

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(user_id, missing_id, VoteType.UP)
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                user_id, missing_id, VoteType.UP, VotableType.ANSWER
            )
        assert await vote_repo.find_by_votable(VotableType.ANSWER, missing_id) == []

    @pytest.mark.asyncio
    async def test_wrong_votable_type_raises_not_found(self, unit_env):
        """A question ID voted on as an answer is not found."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _question(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                UserId(uuid4()), question.id, VoteType.UP, VotableType.ANSWER
            )

    @pytest.mark.asyncio
    async def test_tally_always_equals_sum_of_votes(self, unit_env):
        """After any sequence of votes the tally matches the ledger."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await _question(unit_env)
        users = [UserId(uuid4()) for _ in range(3)]
        sequence = [
            (users[0], VoteType.UP),
            (users[1], VoteType.DOWN),
            (users[2], VoteType.UP),
            (users[0], VoteType.DOWN),
            (users[1], VoteType.DOWN),
            (users[2], VoteType.UP),
            (users[1], VoteType.UP),
        ]

        # Act & Assert
        for user_id, vote_type in sequence:
            outcome = await vote_service.cast_vote(user_id, question.id, vote_type)
            stored = await question_repo.find_by_id(question.id)
            assert stored.votes == outcome.total_votes
            await _assert_tally_matches_ledger(
                unit_env, VotableType.QUESTION, question.id, stored.votes
            )

        # users[0] ended down, users[1] up, users[2] toggled off
        assert (await question_repo.find_by_id(question.id)).votes == 0

    @pytest.mark.asyncio
    async def test_failed_write_rolls_back_vote_and_tally(self, unit_env):
        """A failure after the vote is stored leaves no trace of it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_repo = await unit_env.get(QuestionRepository)
        question = await _question(unit_env)
        user_id = UserId(uuid4())

        async def failing_apply_delta(votable_type, votable_id, delta):
            raise RuntimeError("counter update failed")

        vote_service.votable_registry.apply_delta = failing_apply_delta

        # Act
        with pytest.raises(RuntimeError):
            await vote_service.cast_vote(user_id, question.id, VoteType.UP)

        # Assert
        assert await vote_repo.find_by_votable(VotableType.QUESTION, question.id) == []
        assert (await question_repo.find_by_id(question.id)).votes == 0

    @pytest.mark.asyncio
    async def test_duplicate_insert_is_reported_as_conflict(self, unit_env):
        """A concurrent first vote by the same user surfaces as a conflict."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await _question(unit_env)
        user_id = UserId(uuid4())
        await vote_service.cast_vote(user_id, question.id, VoteType.UP)

        # Simulate the race: the existing vote is invisible to the lookup
        async def no_existing_vote(*args, **kwargs):
            return None

        vote_service.vote_repository.find_by_user_and_votable = no_existing_vote

        # Act & Assert
        with pytest.raises(ConflictError):
            await vote_service.cast_vote(user_id, question.id, VoteType.UP)
        assert (await question_repo.find_by_id(question.id)).votes == 1
        votes = await vote_service.vote_repository.find_by_votable(
            VotableType.QUESTION, question.id
        )
        assert len(votes) == 1
        await _assert_tally_matches_ledger(
            unit_env, VotableType.QUESTION, question.id, 1
        )


class TestConcurrentVotes:
    """Votes cast at the same time, each in its own request scope."""

    @staticmethod
    async def _cast_in_own_request(container, user_id, votable_id, vote_type):
        async with container() as request_container:
            service = await request_container.get(VoteService)
            return await service.cast_vote(user_id, votable_id, vote_type)

    @pytest.mark.asyncio
    async def test_votes_from_different_users_all_land(self):
        """Every concurrent delta reaches the tally."""
        # Arrange
        container = build_test_container()
        async with container() as setup:
            question = await _question(setup)
        voters = [UserId(uuid4()) for _ in range(5)]

        # Act
        await asyncio.gather(
            *(
                self._cast_in_own_request(
                    container,
                    voter,
                    question.id,
                    VoteType.UP if i % 2 == 0 else VoteType.DOWN,
                )
                for i, voter in enumerate(voters)
            )
        )

        # Assert
        async with container() as check:
            question_repo = await check.get(QuestionRepository)
            assert (await question_repo.find_by_id(question.id)).votes == 1
            await _assert_tally_matches_ledger(
                check, VotableType.QUESTION, question.id, 1
            )
        await container.close()

    @pytest.mark.asyncio
    async def test_same_user_racing_toggle_and_flip_stays_consistent(self):
        """One voter, many simultaneous calls: at most one row, tally in sync."""
        # Arrange
        container = build_test_container()
        async with container() as setup:
            question = await _question(setup)
        voter = UserId(uuid4())
        directions = [VoteType.UP, VoteType.UP, VoteType.DOWN, VoteType.UP]

        # Act
        results = await asyncio.gather(
            *(
                self._cast_in_own_request(container, voter, question.id, direction)
                for direction in directions
            ),
            return_exceptions=True,
        )

        # Assert
        for result in results:
            assert not isinstance(result, Exception) or isinstance(
                result, ConflictError
            )
        async with container() as check:
            vote_repo = await check.get(VoteRepository)
            question_repo = await check.get(QuestionRepository)
            votes = await vote_repo.find_by_votable(VotableType.QUESTION, question.id)
            tally = (await question_repo.find_by_id(question.id)).votes
            assert len(votes) <= 1
            assert tally == sum(int(v.vote_type) for v in votes)
            await _assert_tally_matches_ledger(
                check, VotableType.QUESTION, question.id, tally
            )
        await container.close()


class TestRevokeVote:
    """Tests for revoke_vote."""

    @pytest.mark.asyncio
    async def test_revoke_scenario(self, unit_env):
        """A +1 (0 -> 1), B -1 (-> 0), A revokes (-> -1)."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _question(unit_env)
        user_a = UserId(uuid4())
        user_b = UserId(uuid4())

        # Act
        a_vote = await vote_service.cast_vote(user_a, question.id, VoteType.UP)
        b_vote = await vote_service.cast_vote(user_b, question.id, VoteType.DOWN)
        total = await vote_service.revoke_vote(a_vote.vote_id, user_a)

        # Assert
        assert a_vote.total_votes == 1
        assert b_vote.total_votes == 0
        assert total == -1
        await _assert_tally_matches_ledger(
            unit_env, VotableType.QUESTION, question.id, -1
        )

    @pytest.mark.asyncio
    async def test_revoke_by_other_user_is_rejected(self, unit_env):
        """Only the voter may revoke their vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question = await _question(unit_env)
        owner = UserId(uuid4())
        outcome = await vote_service.cast_vote(owner, question.id, VoteType.UP)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await vote_service.revoke_vote(outcome.vote_id, UserId(uuid4()))
        assert await vote_repo.find_by_id(outcome.vote_id) is not None

    @pytest.mark.asyncio
    async def test_revoke_missing_vote_raises_not_found(self, unit_env):
        """Revoking an unknown vote ID fails."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.revoke_vote(VoteId(uuid4()), UserId(uuid4()))


class TestGetUserVotes:
    """Tests for get_user_votes."""

    @pytest.mark.asyncio
    async def test_returns_only_voted_items(self, unit_env):
        """The mapping contains the user's votes keyed by item ID."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        voted = await _question(unit_env)
        not_voted = await _question(unit_env)
        user_id = UserId(uuid4())
        await vote_service.cast_vote(user_id, voted.id, VoteType.DOWN)

        # Act
        votes = await vote_service.get_user_votes(
            user_id, VotableType.QUESTION, [voted.id, not_voted.id]
        )

        # Assert
        assert set(votes) == {voted.id}
        assert votes[voted.id].vote_type == VoteType.DOWN

    @pytest.mark.asyncio
    async def test_empty_id_list_returns_empty_mapping(self, unit_env):
        """No IDs means no lookup."""
        vote_service = await unit_env.get(VoteService)
        assert await vote_service.get_user_votes(
            UserId(uuid4()), VotableType.ANSWER, []
        ) == {}
