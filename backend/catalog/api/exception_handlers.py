"""Translate domain and request errors into the uniform error payload."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.api.schemas.error import ErrorResponse
from catalog.core.errors import (
    FieldError,
    InfrastructureError,
    ProductNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

VALIDATION_PREFIX = "Validation failed: "
INTERNAL_ERROR_PREFIX = "Internal server error: "

# Leading loc entries that name where a value came from, not the field itself
_LOCATIONS = {"body", "path", "query", "header", "cookie"}


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    payload = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))


def format_field_errors(errors: list[FieldError]) -> str:
    return VALIDATION_PREFIX + ", ".join(str(error) for error in errors)


def field_errors_from_request(errors: list[dict[str, Any]]) -> list[FieldError]:
    """Flatten pydantic/FastAPI error dicts into (field, message) pairs."""
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        field_parts = loc[1:] if loc and loc[0] in _LOCATIONS else loc
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = ".".join(field_parts) or (loc[0] if loc else "request")
        field_errors.append(FieldError(field, error.get("msg", "invalid value")))
    return field_errors


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    message = format_field_errors(exc.errors)
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return error_response(request, status.HTTP_400_BAD_REQUEST, message)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = format_field_errors(field_errors_from_request(exc.errors()))
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return error_response(request, status.HTTP_400_BAD_REQUEST, message)


async def handle_not_found(request: Request, exc: ProductNotFoundError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


async def handle_infrastructure_error(
    request: Request, exc: InfrastructureError
) -> JSONResponse:
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_PREFIX + str(exc)
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unexpected error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_PREFIX + str(exc)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every error translation to the application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ProductNotFoundError, handle_not_found)
    app.add_exception_handler(InfrastructureError, handle_infrastructure_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
