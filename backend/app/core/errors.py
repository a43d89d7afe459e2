"""Error Hierarchy — typed, categorized exceptions for all Product API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are warnings; mapped storage failures are errors;
      only the catch-all for unexpected exceptions reports critical
    - to_response() always carries a human-readable string under "error"
    - No internal details leaked in user-facing messages (context.user_message wins)

Design Decisions:
    - Single hierarchy with ProductApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: int | None = None
    user_message: str | None = None


class ProductApiError(Exception):
    """Base exception for all Product API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": self.context.user_message or self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Client Errors (400-level) ──────────────────────────────────

@dataclass(frozen=True)
class FieldError:
    """One failed validation rule, as reported to the client."""
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class InputValidationError(ProductApiError):
    """Request input failed one or more declared field rules."""
    def __init__(self, errors: list[FieldError], context: ErrorContext | None = None):
        super().__init__(
            "invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = [e.to_dict() for e in self.errors]
        return response


class ResourceNotFoundError(ProductApiError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class OriginNotAllowedError(ProductApiError):
    """Cross-origin request from an origin other than the configured frontend."""
    def __init__(self, origin: str, context: ErrorContext | None = None):
        super().__init__(
            "origin not allowed", "ORIGIN_NOT_ALLOWED", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )
        self.origin = origin


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Database operation failed. Details are logged, never returned."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = GENERIC_ERROR_MESSAGE
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.ERROR, ctx, 500,
        )
        self.operation = operation
