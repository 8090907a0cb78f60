"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from askboard.application.usecase.tag import ListTagsResponse, ListTagsUseCase

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags",
    description="Get every tag with the number of questions using it, most used first.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all tags with usage counts.

    Example:
        GET /api/tags
    """
    with logfire.span("api.list_tags"):
        return await use_case.execute()
