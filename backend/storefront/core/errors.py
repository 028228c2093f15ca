"""Error Hierarchy — typed, categorized exceptions for all Storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope; "details" only carries fields
      the raising site actually knows
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Data-access failures have exactly one type (DatabaseError), raised only by
      the session manager; layers above it never catch or translate
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all Storefront errors."""

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

    def details(self) -> dict[str, Any]:
        """Error-specific fields safe to expose to clients."""
        return {}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.context.user_message or self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        details = self.details()
        if details:
            body["details"] = details
        return {"error": body}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(StorefrontError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation

    def details(self) -> dict[str, Any]:
        return {"operation": self.operation}


class CollectionConsumedError(StorefrontError):
    """A Products collection was traversed a second time."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Products collection has already been consumed",
            "COLLECTION_CONSUMED", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context, 500,
        )
