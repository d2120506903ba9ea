"""Exception handlers mapping domain and framework errors to JSON responses.

Every error body has the same shape: {"error": CODE, "message": str, "details": ...}.
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from msgcache.core.config import get_settings
from msgcache.domain.exceptions import MessageCacheException
from msgcache.shared.telemetry.tracing import get_trace_id

logger = logging.getLogger(__name__)

# Domain error_code -> HTTP status; unmapped codes are client errors (400).
ERROR_CODE_STATUS: dict[str, int] = {
    "MESSAGE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
    "INVALID_PREFIX_CONFIGURATION": 500,
    "CATALOG_UNAVAILABLE": 503,
}


def _error_body(error: str, message: Any, details: Any = None) -> dict[str, Any]:
    return {"error": error, "message": message, "details": details}


def _message_cache_exception_handler(
    request: Request, exc: MessageCacheException
) -> JSONResponse:
    status = ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=_error_body("VALIDATION_ERROR", "Request validation failed", exc.errors()),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and wrong methods; the code is the status phrase (NOT_FOUND, ...)."""
    try:
        code = HTTPStatus(exc.status_code).name
    except ValueError:
        code = "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; the exception text is only exposed when debug is on."""
    logger.exception("Unhandled exception on %s: %s", request.url.path, exc)
    message = str(exc) if get_settings().debug else "Internal server error"
    content = _error_body("INTERNAL_ERROR", message)
    request_id = request.scope.get("state", {}).get("request_id")
    if request_id:
        content["request_id"] = request_id
    trace_id = get_trace_id()
    if trace_id:
        content["trace_id"] = trace_id
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all handlers on app. Call once after creating it."""
    app.add_exception_handler(MessageCacheException, _message_cache_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
