"""
Error taxonomy and the handlers that render every failure as
{"error": ..., "details"?: ..., "requestId"?: ...}
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors that map to a client response"""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details


class Unauthorized(APIError):
    status_code = 401
    message = "Access token required"


class Forbidden(APIError):
    status_code = 403
    message = "Invalid or expired token"


class Conflict(APIError):
    status_code = 400
    message = "Resource already exists"


class NotFound(APIError):
    status_code = 404
    message = "Not found"


class ValidationError(APIError):
    status_code = 400
    message = "Validation failed"


class InternalError(APIError):
    status_code = 500
    message = "Internal server error"


def error_body(request: Request, message: str, details: Any = None) -> dict:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        body["requestId"] = request_id
    return body


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_body(request, exc.message, exc.details)),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=jsonable_encoder(error_body(request, ValidationError.message, details)),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request, message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    logger.error(
        f"Unhandled error on {request.method} {request.url.path} request_id={request_id}: {exc}",
        exc_info=exc,
    )
    details = str(exc) if request.app.state.settings.expose_error_details else None
    return JSONResponse(
        status_code=InternalError.status_code,
        content=error_body(request, InternalError.message, details),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
