"""Mapping of domain errors to HTTP responses.

Every error body has the same shape::

    {"error": "<code>", "message": "<text>", "request_id": "<id>"}
"""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from askboard.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from askboard.interface.api.request_id import request_id_var
from askboard.util.jwt import JWTError


def _request_id(request: Request) -> str:
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _error_response(
    request: Request, status_code: int, error: str, message: str
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "request_id": _request_id(request),
        },
    )


def _describe_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error entries into one readable line."""
    parts = []
    for err in errors:
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers translating errors into consistent JSON responses.

    Handler map:
        ValidationError / pydantic.ValidationError / RequestValidationError -> 400
        AuthenticationError / JWTError -> 401
        NotAuthorizedError -> 403
        NotFoundError -> 404
        ConflictError -> 409
        Exception -> 500 (generic message, details only in the server log)

    Args:
        app: FastAPI application
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logfire.warn("Validation error", error=str(exc), request_id=_request_id(request))
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, "validation_error", str(exc)
        )

    @app.exception_handler(pydantic.ValidationError)
    async def handle_model_validation_error(
        request: Request, exc: pydantic.ValidationError
    ):
        message = _describe_validation_errors(exc.errors())
        logfire.warn("Validation error", error=message, request_id=_request_id(request))
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, "validation_error", message
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        message = _describe_validation_errors(list(exc.errors()))
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, "validation_error", message
        )

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(
            request, status.HTTP_401_UNAUTHORIZED, "unauthorized", str(exc)
        )

    @app.exception_handler(JWTError)
    async def handle_jwt_error(request: Request, exc: JWTError):
        return _error_response(
            request, status.HTTP_401_UNAUTHORIZED, "unauthorized", str(exc)
        )

    @app.exception_handler(NotAuthorizedError)
    async def handle_not_authorized(request: Request, exc: NotAuthorizedError):
        logfire.warn(
            "Forbidden",
            resource=exc.resource,
            resource_id=exc.resource_id,
            user_id=exc.user_id,
            request_id=_request_id(request),
        )
        return _error_response(
            request,
            status.HTTP_403_FORBIDDEN,
            "forbidden",
            f"Not allowed to modify this {exc.resource}",
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(
            request, status.HTTP_404_NOT_FOUND, "not_found", f"{exc.resource} not found"
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logfire.warn("Conflict", error=str(exc), request_id=_request_id(request))
        return _error_response(request, status.HTTP_409_CONFLICT, "conflict", str(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = _request_id(request)
        logfire.exception(
            "Unexpected error", error_type=type(exc).__name__, request_id=rid
        )
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_server_error",
            "An unexpected error occurred",
        )
