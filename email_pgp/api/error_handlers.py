"""
Global exception handlers.

Every error response has the shape {"error": "<fixed message>"}. Internal
details are logged and never sent to the client.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from email_pgp.api.routes import INVALID_INPUT_MESSAGES
from email_pgp.exceptions import InvalidInputError, ServiceError
from email_pgp.observability import sanitize_for_log

logger = structlog.get_logger(__name__)

_GENERIC_INVALID_INPUT = "Invalid request body."
_INTERNAL_ERROR = "Internal server error."


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _generic_error_handler)


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if isinstance(exc, InvalidInputError):
        logger.info("Rejected request", path=request.url.path, missing=list(exc.missing))
    else:
        # The cause was already logged by the service.
        logger.warning("Request failed", path=request.url.path, error_type=type(exc).__name__)
    return error_response(exc.http_status, exc.public_message)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.info("HTTP error", path=request.url.path, status_code=exc.status_code)
    return error_response(exc.status_code, str(exc.detail), exc.headers)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = exc.body if isinstance(exc.body, dict) else None
    logger.info(
        "Invalid request body",
        path=request.url.path,
        fields=[".".join(str(loc) for loc in e["loc"]) for e in exc.errors()],
        body=sanitize_for_log(body) if body is not None else None,
    )
    message = INVALID_INPUT_MESSAGES.get(request.url.path, _GENERIC_INVALID_INPUT)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def _generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", path=request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR)
