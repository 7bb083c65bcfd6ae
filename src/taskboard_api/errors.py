"""Translation of request failures into plain-text HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from taskboard_api.middleware import get_cors_headers
from taskboard_common.errors import AppError

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Erro inesperado"


def translate_error(exc: BaseException) -> tuple[int, str]:
    """Compute the status code and body for a failed request.

    The status is the one explicitly attached to the failure, or 500 when
    none was set. The body is the failure's message, or a generic fallback
    when it carries none. Driver errors only expose the driver's own message,
    never the SQL statement or its parameters.

    Args:
        exc: The caught exception

    Returns:
        Tuple of (status code, plain-text body)
    """
    if isinstance(exc, AppError):
        status_code, message = exc.status_code, exc.message
    elif isinstance(exc, DBAPIError) and exc.orig is not None:
        status_code, message = None, str(exc.orig)
    else:
        status_code, message = None, str(exc)

    if status_code is None:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return status_code, message or FALLBACK_MESSAGE


def register_exception_handlers(app: FastAPI, cors_origins: list[str] | None = None) -> None:
    """Register handlers that turn every failure into a plain-text response.

    Args:
        app: FastAPI application instance
        cors_origins: Allowed CORS origins, used for the catch-all handler
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> PlainTextResponse:
        status_code, body = translate_error(exc)
        logger.warning("%s %s failed with %d: %s", request.method, request.url.path, status_code, body)
        return PlainTextResponse(body, status_code=status_code)

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> PlainTextResponse:
        status_code, body = translate_error(exc)
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
        return PlainTextResponse(body, status_code=status_code)

    # Runs outside the CORS middleware, so the headers are added here
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        status_code, body = translate_error(exc)
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        cors_headers = get_cors_headers(request.headers.get("origin"), cors_origins)
        return PlainTextResponse(body, status_code=status_code, headers=cors_headers)
