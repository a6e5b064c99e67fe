"""Error Hierarchy — typed, categorized exceptions for every Contacts API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors map to 400/404; store failures map to 500
    - to_response() produces the REST envelope used by all error responses
    - No driver/SQL details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ContactsAPIError base: one global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONSTRAINT = "constraint"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and response bodies."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    contact_id: int | None = None
    operation: str | None = None


class ContactsAPIError(Exception):
    """Base exception for all Contacts API errors."""

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
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "contact_id": self.context.contact_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ContactsAPIError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConstraintViolationError(ContactsAPIError):
    """Write rejected by a table constraint (NOT NULL, UNIQUE, CHECK)."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Integrity constraint violated during {operation}",
            "CONSTRAINT_VIOLATION", ErrorCategory.CONSTRAINT,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.operation = operation


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ContactsAPIError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
