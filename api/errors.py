"""
Exception handlers.

Turns module exceptions into JSON responses. Each failure produces exactly
one response; 5xx responses never carry internal details.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import QuillError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"
_PYDANTIC_PREFIXES = ("Value error, ", "Assertion failed, ")


def _server_error_body() -> dict[str, Any]:
    # Internal codes stay in the logs
    return {"error": "INTERNAL_ERROR", "message": SERVER_ERROR_MESSAGE, "details": {}}


def _field_name(loc: tuple) -> str:
    # loc starts with "body", "query", "path" or "header"
    parts = [str(p) for p in loc[1:]] or [str(loc[0])]
    return ".".join(parts)


def _field_message(message: str) -> str:
    for prefix in _PYDANTIC_PREFIXES:
        if message.startswith(prefix):
            return message[len(prefix):]
    return message


async def handle_quill_error(request: Request, exc: QuillError) -> JSONResponse:
    """Map a QuillError to its status code."""
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.code}",
            extra={"details": exc.details},
        )
        return JSONResponse(status_code=exc.status_code, content=_server_error_body())

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with per-field messages."""
    errors = [
        {"field": _field_name(tuple(err.get("loc", ()))), "message": _field_message(err.get("msg", ""))}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Validation failed.",
            "details": {"errors": errors},
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything that escaped the typed hierarchy."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=_server_error_body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuillError, handle_quill_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
