"""
Exception handlers.

Turns domain exceptions and request validation failures into the two
response envelopes the client understands:

- ``{"errors": [{"msg", "param", "location"}, ...]}`` for field validation
  and credential failures
- ``{"msg": "..."}`` for everything else

Unexpected exceptions are logged with their traceback and answered with a
generic 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import AgoraError, field_error

logger = logging.getLogger(__name__)


def _error_param(loc: tuple) -> str | None:
    """The field name from a pydantic error location, if there is one."""
    if len(loc) > 1 and isinstance(loc[-1], str):
        return loc[-1]
    return None


async def agora_error_handler(request: Request, exc: AgoraError) -> JSONResponse:
    """Map a domain exception to its status code and envelope."""
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.to_dict(),
        )
    else:
        logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report every invalid field at once with a 400."""
    errors = [
        field_error(
            error["msg"],
            param=_error_param(tuple(error["loc"])),
            location=str(error["loc"][0]) if error["loc"] else "body",
        )
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"errors": errors})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the failure, tell the client nothing about it."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"msg": "Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(AgoraError, agora_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
