"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from askboard.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from askboard.interface.api.auth import bearer_scheme, require_user

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account and return a token for it.

    Raises:
        ConflictError: If the username or email is already taken (409)

    Example:
        POST /api/auth/register
        {"username": "alice", "email": "alice@example.com", "password": "secret1"}
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a token.

    Raises:
        AuthenticationError: If the credentials don't match (401)
    """
    with logfire.span("api.login"):
        return await login_use_case.execute(request)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetCurrentUserResponse:
    """Return the profile of the authenticated user."""
    return await require_user(credentials, get_current_user_use_case)
