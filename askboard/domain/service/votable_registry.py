"""Votable registry domain service.

Questions and answers are both votable. Votes point at them through a
``(votable_type, votable_id)`` pair with no foreign key, so this service
is the single place that turns that pair back into a row of the right
table.
"""

from uuid import UUID

import logfire

from askboard.domain.error import NotFoundError
from askboard.domain.repository import AnswerRepository, QuestionRepository
from askboard.domain.value import AnswerId, QuestionId, VotableType

from .base import Service


class VotableRegistry(Service):
    """Finds and adjusts the tally of questions and answers by kind."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize votable registry.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def resolve(self, votable_id: UUID) -> VotableType:
        """Work out which kind of item an ID names.

        Questions are checked first, then answers.

        Args:
            votable_id: ID of a question or an answer

        Returns:
            The item's kind

        Raises:
            NotFoundError: If neither a question nor an answer has this ID
        """
        with logfire.span("votable_registry.resolve", votable_id=str(votable_id)):
            if await self.question_repository.exists(QuestionId(votable_id)):
                return VotableType.QUESTION
            if await self.answer_repository.exists(AnswerId(votable_id)):
                return VotableType.ANSWER

            logfire.warn("Votable not found", votable_id=str(votable_id))
            raise NotFoundError("Votable", str(votable_id))

    async def exists(
        self, votable_type: VotableType, votable_id: UUID, lock: bool = False
    ) -> bool:
        """Check whether an item of the given kind exists.

        With ``lock`` the row is held against deletion until the end of the
        current transaction.
        """
        if votable_type == VotableType.QUESTION:
            return await self.question_repository.exists(QuestionId(votable_id), lock)
        return await self.answer_repository.exists(AnswerId(votable_id), lock)

    async def get_tally(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Read the cached vote tally of an item.

        Not used by the request path, which gets the tally back from
        ``apply_delta``. Kept for comparing against ``sum_by_votable``.

        Raises:
            NotFoundError: If the item doesn't exist
        """
        if votable_type == VotableType.QUESTION:
            item = await self.question_repository.find_by_id(QuestionId(votable_id))
        else:
            item = await self.answer_repository.find_by_id(AnswerId(votable_id))

        if item is None:
            raise NotFoundError(_resource_name(votable_type), str(votable_id))
        return item.votes

    async def apply_delta(
        self, votable_type: VotableType, votable_id: UUID, delta: int
    ) -> int:
        """Add ``delta`` to an item's tally with a single relative update.

        Args:
            votable_type: Kind of item
            votable_id: ID of the item
            delta: Signed amount to add

        Returns:
            The tally after the update

        Raises:
            NotFoundError: If the item doesn't exist
        """
        with logfire.span(
            "votable_registry.apply_delta",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            delta=delta,
        ):
            if votable_type == VotableType.QUESTION:
                total = await self.question_repository.apply_vote_delta(
                    QuestionId(votable_id), delta
                )
            else:
                total = await self.answer_repository.apply_vote_delta(
                    AnswerId(votable_id), delta
                )

            if total is None:
                logfire.warn(
                    "Tally update on missing item",
                    votable_type=votable_type.value,
                    votable_id=str(votable_id),
                )
                raise NotFoundError(_resource_name(votable_type), str(votable_id))
            return total


def _resource_name(votable_type: VotableType) -> str:
    return votable_type.value.capitalize()
