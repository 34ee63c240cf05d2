"""Request correlation and error responses.

Every error leaving the API, whether raised as HTTPException, failed
request validation, a catalog DomainError or an unexpected crash, is
rendered as the same envelope:

    {"error_code": ..., "message": ..., "details": [...], "request_id": ...}
"""

import time
from typing import Any, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from productsearch.catalog.exceptions import (
    DomainError,
    InvalidPaginationError,
    ProductNotFoundError,
)

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Status code and error code per catalog exception; checked in order
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int, str]] = [
    (ProductNotFoundError, status.HTTP_404_NOT_FOUND, "PRODUCT_NOT_FOUND"),
    (InvalidPaginationError, status.HTTP_400_BAD_REQUEST, "INVALID_PAGINATION"),
]


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render the standard error envelope.

    Args:
        request: Request being answered; supplies the request ID.
        status_code: HTTP status.
        error_code: Machine-readable error code.
        message: Human-readable message.
        details: Extra error context.
        headers: Extra response headers.

    Returns:
        JSON error response.
    """
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
        headers=headers,
    )


# ============================================================================
# Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its outcome.

    The ID comes from the X-Request-ID header when the client sends one.
    It is stored on request.state, bound into the structlog context for
    the duration of the request and echoed on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                response = await call_next(request)
                status_code = response.status_code
            finally:
                logger.info(
                    "Request completed",
                    method=request.method,
                    path=request.url.path,
                    query=str(request.query_params) or None,
                    status_code=status_code,
                    duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn anything the handlers did not catch into a 500 envelope.

    Database failures (lost connections, constraint violations) end up
    here; nothing is retried.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error_type=type(e).__name__,
            )
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )


# ============================================================================
# Exception Handlers
# ============================================================================


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTPException, accepting a dict detail with error_code/message/details."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return error_response(
        request,
        exc.status_code,
        error_code,
        message,
        details,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render query/path validation failures as a 422 envelope.

    Each detail names the offending parameter (e.g. "pageNumber") and
    pydantic's message for it.
    """
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        # Drop the "query"/"path"/"body" prefix
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        details.append({"field": field or None, "message": error.get("msg", "")})

    logger.info("Request validation failed", path=request.url.path, errors=len(details))

    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        details,
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render catalog errors with their mapped status code."""
    for error_type, status_code, error_code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            break
    else:
        status_code, error_code = status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR"

    return error_response(request, status_code, error_code, exc.message, [exc.details])


# ============================================================================
# Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Install error handlers and middleware on the application.

    Middleware is added in reverse order (last added = first executed),
    so RequestIdMiddleware wraps ErrorHandlerMiddleware and even 500s
    carry the request ID.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DomainError, domain_error_handler)

    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
