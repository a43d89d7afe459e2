"""Error Handlers — global exception handlers for the Product API.

Invariants:
    - ProductApiError → {"error": <message>, "code", "category", "severity", ...}
    - RequestValidationError → same shape as InputValidationError (400, field list)
    - HTTPException (unknown route, wrong method) → same envelope, framework status
    - Exception (catch-all) → 500, never leaks internal details
    - Every request gets exactly one response; causes of 5xx are logged with traceback

Design Decisions:
    - Four-layer handler: domain, framework validation, framework HTTP, catch-all
    - Registered from main.py via register_error_handlers (keeps main.py small)
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import (
    ProductApiError, ErrorSeverity, ErrorCategory, FieldError,
    InputValidationError, GENERIC_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register Product API domain/infrastructure error handler."""

    @app.exception_handler(ProductApiError)
    async def api_error_handler(request: Request, exc: ProductApiError):
        """Handle all Product API errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "product_id": exc.context.product_id,
        }
        if exc.http_status >= 500:
            logger.error(f"ProductApiError: {exc.message}", extra=extra)
        else:
            logger.warning(f"ProductApiError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTPException handler (404 route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": str(exc.detail),
                "code": "HTTP_ERROR",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.WARNING.value,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": GENERIC_ERROR_MESSAGE,
                "code": "INTERNAL_ERROR",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )


# ─── Validation Error Mapping ────────────────────────────────────

INVALID_ID_MESSAGE = "invalid id"
BODY_MESSAGE = "request body must be a JSON object"

# Type-level failures (wrong JSON type, unparseable number) per body field
_FIELD_TYPE_MESSAGES = {
    "name": "name must be text",
    "price": "price must be numeric",
    "availability": "availability must be a boolean",
}


def _to_field_error(error: dict) -> FieldError:
    """Map one Pydantic error to the client-facing {field, message} pair.

    Path errors are always "invalid id". Errors located at the body itself
    (missing, malformed JSON, not an object) are reported under "body".
    """
    loc = error.get("loc", ())
    if loc and loc[0] == "path":
        return FieldError(field=str(loc[-1]), message=INVALID_ID_MESSAGE)
    if len(loc) < 2 or not isinstance(loc[1], str):
        return FieldError(field="body", message=BODY_MESSAGE)

    field_name = loc[1]
    ctx = error.get("ctx") or {}
    if error["type"] == "value_error" and "error" in ctx:
        return FieldError(field=field_name, message=str(ctx["error"]))
    if error["type"] == "string_too_long":
        return FieldError(
            field=field_name,
            message=f"{field_name} must be at most {ctx['max_length']} characters",
        )
    return FieldError(
        field=field_name,
        message=_FIELD_TYPE_MESSAGES.get(field_name, error["msg"]),
    )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    errors = [_to_field_error(e) for e in exc.errors()]
    return InputValidationError(errors).to_response()
