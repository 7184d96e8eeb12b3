from collections.abc import Mapping, Sequence
from typing import Any, cast
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from bookstore.core.exceptions import BookstoreError
from bookstore.core.logging import get_logger


class ErrorBody(BaseModel):
    """Structured error body."""
    type: str
    details: dict[str, object] | None = None
    meta: dict[str, object] = {}


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
    error: ErrorBody


def _build_meta(request: Request) -> dict[str, object]:
    """Collect metadata for error responses."""
    return {
        "requestId": getattr(request.state, "correlation_id", "-"),
        "path": request.url.path,
        "method": request.method,
    }


def _error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: dict[str, object] | None = None,
) -> JSONResponse:
    body = ErrorEnvelope(
        message=message,
        error=ErrorBody(type=error_type, details=details, meta=_build_meta(request)),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _serialize_validation_errors(errors: Sequence[Mapping[Any, Any]]) -> list[dict[str, object]]:
    """Serialize validation errors, handling non-serializable objects in context."""

    serialized_errors: list[dict[str, object]] = []

    for error in errors:
        serialized_error: dict[str, object] = dict(error)

        if "ctx" in serialized_error and isinstance(serialized_error["ctx"], dict):
            ctx: dict[str, object] = cast(dict[str, object], serialized_error["ctx"]).copy()

            if "error" in ctx:
                ctx["error"] = str(ctx["error"])
            serialized_error["ctx"] = ctx
        # Raw input may hold bytes or other non-JSON values
        if "input" in serialized_error and not isinstance(
            serialized_error["input"], (str, int, float, bool, list, dict, type(None))
        ):
            serialized_error["input"] = str(serialized_error["input"])
        serialized_errors.append(serialized_error)
    return serialized_errors


def _classify_integrity_error(exc: IntegrityError) -> str:
    error_message = str(exc.orig) if exc.orig is not None else str(exc)
    lowered = error_message.lower()
    if "foreign key" in lowered:
        return "Referenced resource not found"
    if "unique" in lowered:
        return "Resource already exists"
    if "check constraint" in lowered:
        return "Invalid data value"
    return "Data integrity violation"


def register_exception_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers."""

    @app.exception_handler(BookstoreError)
    async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info(
            "Domain error: %s", exc.message, extra={"error_type": exc.error_type}
        )
        return _error_response(
            request, exc.status_code, exc.error_type, exc.message, exc.details
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("HTTP error", extra={"status_code": exc.status_code})
        if isinstance(exc.detail, dict):
            message = "Request failed"
            details = cast(dict[str, object], exc.detail)
        else:
            message = exc.detail or "HTTP error"
            details = None
        return _error_response(request, exc.status_code, "http_error", message, details)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info("Validation error")
        return _error_response(
            request,
            HTTP_400_BAD_REQUEST,
            "invalid_input",
            "Invalid request payload",
            {"errors": _serialize_validation_errors(exc.errors())},
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("Database integrity error", extra={"error": str(exc.orig)})
        return _error_response(
            request, HTTP_400_BAD_REQUEST, "conflict", _classify_integrity_error(exc)
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.exception("Unhandled server error", exc_info=exc)
        return _error_response(
            request,
            HTTP_500_INTERNAL_SERVER_ERROR,
            "server_error",
            "Internal Server Error",
        )
