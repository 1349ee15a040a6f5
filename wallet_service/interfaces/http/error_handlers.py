"""Global exception handlers rendering the standard response envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        response = envelope(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s", request.url.path)
        return envelope(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request",
            jsonable_encoder(exc.errors(), exclude={"input", "ctx"}),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred")


__all__ = ["register_error_handlers"]
