"""Question routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from askboard.application.usecase.answer import (
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.common import QuestionItem
from askboard.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    MAX_PAGE,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from askboard.interface.api.auth import bearer_scheme, optional_user_id, require_user

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class QuestionAPIRequest(BaseModel):
    """API request for creating or editing a question."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=30000)
    tags: list[str] = Field(min_length=1, max_length=5)


@router.post("", response_model=QuestionItem, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: QuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> QuestionItem:
    """Ask a new question.

    Every tag must already exist.

    Example:
        POST /api/questions
        {"title": "...", "content": "...", "tags": ["python", "sql"]}
    """
    user = await require_user(credentials, get_current_user_use_case)

    return await create_question_use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            content=request.content,
            tag_names=request.tags,
            author_id=user.id,
        )
    )


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int | None = None,
    tag: str | None = None,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListQuestionsResponse:
    """List questions newest first.

    Example:
        GET /api/questions?page=2&limit=10&tag=python
    """
    user_id = await optional_user_id(credentials, get_current_user_use_case)

    with logfire.span("api.list_questions", page=page, limit=limit, tag=tag):
        return await list_questions_use_case.execute(
            ListQuestionsRequest(page=page, limit=limit, tag=tag, user_id=user_id)
        )


@router.get("/{question_id}", response_model=QuestionItem)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> QuestionItem:
    """Get a question. Counts as one view."""
    user_id = await optional_user_id(credentials, get_current_user_use_case)

    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=str(question_id), user_id=user_id)
    )


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListAnswersResponse:
    """List a question's answers, accepted first, then by votes, then oldest."""
    user_id = await optional_user_id(credentials, get_current_user_use_case)

    return await list_answers_use_case.execute(
        ListAnswersRequest(question_id=str(question_id), user_id=user_id)
    )


@router.put("/{question_id}", response_model=QuestionItem)
async def update_question(
    question_id: UUID,
    request: QuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> QuestionItem:
    """Edit a question. Only its author may do this; tags are replaced."""
    user = await require_user(credentials, get_current_user_use_case)

    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            user_id=user.id,
            title=request.title,
            content=request.content,
            tag_names=request.tags,
        )
    )


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Response:
    """Delete a question with its answers and all their votes."""
    user = await require_user(credentials, get_current_user_use_case)

    await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=str(question_id), user_id=user.id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
