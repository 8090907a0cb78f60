"""Unit tests for the cast and revoke vote use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from askboard.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RevokeVoteRequest,
    RevokeVoteUseCase,
)
from askboard.domain.error import NotAuthorizedError, NotFoundError
from askboard.domain.repository import AnswerRepository, QuestionRepository
from askboard.domain.value import UserId, VotableType
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVote:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_type_is_resolved_when_omitted(self, unit_env):
        """Votes on answers work without naming the type."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                votable_id=str(answer.id), vote_type=1, user_id=str(uuid4())
            )
        )

        # Assert
        assert response.votable_type == VotableType.ANSWER
        assert response.new_vote_type == 1
        assert response.total_votes == 1
        assert response.vote_id is not None

    @pytest.mark.asyncio
    async def test_repeating_a_vote_toggles_it_off(self, unit_env):
        """Same direction twice removes the vote."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        use_case = await unit_env.get(CastVoteUseCase)
        request = CastVoteRequest(
            votable_id=str(question.id),
            votable_type=VotableType.QUESTION,
            vote_type=-1,
            user_id=str(uuid4()),
        )
        await use_case.execute(request)

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.new_vote_type == 0
        assert response.total_votes == 0
        assert response.vote_id is None

    @pytest.mark.asyncio
    async def test_unknown_item_raises_not_found(self, unit_env):
        """Voting on nothing fails."""
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    votable_id=str(uuid4()), vote_type=1, user_id=str(uuid4())
                )
            )

    @pytest.mark.parametrize("vote_type", [True, 1.0, 0, 2])
    def test_vote_type_is_strictly_one_or_minus_one(self, vote_type):
        """Only the integers 1 and -1 name a direction."""
        with pytest.raises(PydanticValidationError):
            CastVoteRequest(
                votable_id=str(uuid4()), vote_type=vote_type, user_id=str(uuid4())
            )


class TestRevokeVote:
    """Tests for RevokeVoteUseCase."""

    @pytest.mark.asyncio
    async def test_owner_revokes_vote(self, unit_env):
        """Revoking restores the previous tally."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        voter = str(uuid4())
        cast = await unit_env.get(CastVoteUseCase)
        vote = await cast.execute(
            CastVoteRequest(votable_id=str(question.id), vote_type=1, user_id=voter)
        )
        use_case = await unit_env.get(RevokeVoteUseCase)

        # Act
        response = await use_case.execute(
            RevokeVoteRequest(vote_id=vote.vote_id, user_id=voter)
        )

        # Assert
        assert response.total_votes == 0
        assert (await question_repo.find_by_id(question.id)).votes == 0

    @pytest.mark.asyncio
    async def test_someone_elses_vote_is_refused(self, unit_env):
        """Only the voter may revoke."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        cast = await unit_env.get(CastVoteUseCase)
        vote = await cast.execute(
            CastVoteRequest(votable_id=str(question.id), vote_type=1, user_id=str(uuid4()))
        )
        use_case = await unit_env.get(RevokeVoteUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                RevokeVoteRequest(vote_id=vote.vote_id, user_id=str(uuid4()))
            )
