"""Get stats use case."""

import math

import logfire
from pydantic import BaseModel

from askboard.domain.service import AnswerService, QuestionService, TagService


class GetStatsResponse(BaseModel):
    """Forum-wide statistics."""

    total: int  # Number of questions
    resolution: int  # Percentage of questions with an accepted answer
    active_tags: int  # Tags used by at least one question


class GetStatsUseCase:
    """Use case for the forum statistics panel."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
    ) -> None:
        """Initialize get stats use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            tag_service: Tag domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.tag_service = tag_service

    async def execute(self) -> GetStatsResponse:
        """Execute get stats flow."""
        with logfire.span("get_stats.execute"):
            total = await self.question_service.count_questions()
            resolved = await self.answer_service.count_resolved_questions()
            active_tags = await self.tag_service.count_active_tags()

            resolution = math.floor(resolved * 100 / total + 0.5) if total else 0

            return GetStatsResponse(
                total=total, resolution=resolution, active_tags=active_tags
            )
