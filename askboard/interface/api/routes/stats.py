"""Site statistics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from askboard.application.usecase.stats import GetStatsResponse, GetStatsUseCase

router = APIRouter(prefix="/stats", tags=["stats"], route_class=DishkaRoute)


@router.get("", response_model=GetStatsResponse)
async def get_stats(use_case: FromDishka[GetStatsUseCase]) -> GetStatsResponse:
    """Return question count, resolution percentage and active tag count."""
    return await use_case.execute()
