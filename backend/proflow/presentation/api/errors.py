"""Error responses shared by all API routes — body shape ``{"error": ..., "details"?: ...}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from proflow.domain.exceptions import (
    EntityNotFoundError,
    InvalidRequestError,
    PaymentError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body: dict[str, str] = {"error": error}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", problems)


async def _not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def _bad_request_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, str(exc))


async def _unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions that escape a route onto HTTP error responses."""
    app.add_exception_handler(RequestValidationError, _validation_handler)
    app.add_exception_handler(EntityNotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidRequestError, _bad_request_handler)
    app.add_exception_handler(PaymentError, _bad_request_handler)
    app.add_exception_handler(UnauthorizedError, _unauthorized_handler)
    app.add_exception_handler(Exception, _unhandled_handler)
