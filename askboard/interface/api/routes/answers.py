"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from askboard.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.common import AnswerItem
from askboard.interface.api.auth import bearer_scheme, require_user

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    question_id: UUID
    content: str = Field(min_length=1, max_length=30000)


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    content: str = Field(min_length=1, max_length=30000)


@router.post("", response_model=AnswerItem, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AnswerItem:
    """Answer a question.

    Raises:
        NotFoundError: If the question doesn't exist (404)
    """
    user = await require_user(credentials, get_current_user_use_case)

    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=str(request.question_id),
            content=request.content,
            author_id=user.id,
        )
    )


@router.put("/{answer_id}", response_model=AnswerItem)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AnswerItem:
    """Edit an answer. Only its author may do this, accepted or not."""
    user = await require_user(credentials, get_current_user_use_case)

    return await update_answer_use_case.execute(
        UpdateAnswerRequest(
            answer_id=str(answer_id), user_id=user.id, content=request.content
        )
    )


@router.delete("/{answer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Delete an answer and every vote on it."""
    user = await require_user(credentials, get_current_user_use_case)

    await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=str(answer_id), user_id=user.id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{answer_id}/accept", response_model=AnswerItem)
async def accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AnswerItem:
    """Mark an answer as the accepted one for its question.

    Only the question's author may accept. Any previously accepted answer
    of the same question is un-accepted in the same transaction.

    Raises:
        NotAuthorizedError: If the caller didn't ask the question (403)
        ConflictError: If a concurrent accept won (409)
    """
    user = await require_user(credentials, get_current_user_use_case)

    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(answer_id=str(answer_id), user_id=user.id)
    )
