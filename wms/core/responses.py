"""WMS API — Error envelope helpers and exception handlers."""
import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _error_code(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase.upper().replace(" ", "_").replace("-", "_")
    except ValueError:
        return "ERROR"


def error_response(message: str, code: str, field_errors: list[dict] | None = None) -> dict:
    error: dict[str, Any] = {"code": code}
    if field_errors is not None:
        error["errors"] = field_errors
    return {"success": False, "data": None, "message": message, "error": error, "meta": None}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else _error_code(exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_response(message, _error_code(exc.status_code))),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = [
        {
            # loc is ("body" | "query" | "path", field, ...)
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]) or str(err.get("loc", ("",))[0]),
            "message": err.get("msg"),
            "value": err.get("input"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(error_response("Validation failed", "VALIDATION_ERROR", field_errors)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("Internal server error", "INTERNAL_SERVER_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
