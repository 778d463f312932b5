"""Mapping of errors to JSON responses.

Every failure leaves the API as ``{"error": <message>, "code": <code>}``.
"""

import logfire
import pydantic
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prompthub.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message, "code": code}
    )


def first_error_message(errors: list[dict]) -> str:
    """Human readable message of the first validation error."""
    if not errors:
        return "Invalid request"
    message = str(errors[0].get("msg", "Invalid request"))
    # Messages from field validators are prefixed by pydantic
    return message.removeprefix("Value error, ")


async def handle_unauthorized(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return error_response(401, str(exc), "UNAUTHORIZED")


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.info("Validation failed", path=request.url.path, error=str(exc))
    return error_response(400, str(exc), "VALIDATION_ERROR")


async def handle_request_validation(
    request: Request, exc: RequestValidationError | pydantic.ValidationError
) -> JSONResponse:
    message = first_error_message(list(exc.errors()))
    logfire.info("Request validation failed", path=request.url.path, error=message)
    return error_response(400, message, "VALIDATION_ERROR")


async def handle_not_authorized(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    logfire.warn(
        "Forbidden",
        path=request.url.path,
        resource=exc.resource,
        resource_id=exc.resource_id,
        user_id=exc.user_id,
    )
    return error_response(403, str(exc), "FORBIDDEN")


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(404, f"{exc.resource} not found", "NOT_FOUND")


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return error_response(500, INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR")


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an app."""
    app.add_exception_handler(UnauthorizedError, handle_unauthorized)
    app.add_exception_handler(ValidationError, handle_validation)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(pydantic.ValidationError, handle_request_validation)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(Exception, handle_unexpected)
