"""Centralized exception handlers for the canchas service."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from canchas.core.exceptions import (
    CanchasError,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


# Routing errors (unknown path, wrong method) reuse the domain error kinds.
_HTTP_ERROR_KINDS = {
    status.HTTP_400_BAD_REQUEST: ValidationError.error,
    status.HTTP_404_NOT_FOUND: NotFoundError.error,
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def register_exception_handlers(app: FastAPI) -> None:
    """Register FastAPI exception handlers that return a normalized JSON payload."""

    @app.exception_handler(CanchasError)
    async def domain_exception_handler(request: Request, exc: CanchasError) -> JSONResponse:
        if isinstance(exc, StorageError):
            logger.error(
                "Storage failure while processing %s %s: %s",
                request.method,
                request.url,
                exc.detail,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:  # type: ignore[override]
        payload = {
            "detail": str(exc.detail),
            "error": _HTTP_ERROR_KINDS.get(exc.status_code, "http_error"),
        }
        response = JSONResponse(status_code=exc.status_code, content=payload)

        if exc.headers:
            for key, value in exc.headers.items():
                response.headers[key] = value

        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        messages = []
        for error in exc.errors():
            location = [str(loc) for loc in error.get("loc", []) if loc != "body"]
            message = error.get("msg", "Invalid input")
            if location:
                messages.append(f"{'.'.join(location)}: {message}")
            else:
                messages.append(message)

        detail = "; ".join(messages) if messages else "Invalid request"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": detail, "error": ValidationError.error},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error", "error": "internal_error"},
        )


__all__ = ["register_exception_handlers"]
