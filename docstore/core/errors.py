"""Error Hierarchy — typed, categorized exceptions for docstore's edges.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope; no internal details leaked in user-facing messages
    - Only errors raised at the HTTP edge reach the global handler; DocumentService
      converts the ones raised beneath it into OperationResult values

Design Decisions:
    - Single hierarchy with DocStoreError base: the FastAPI global handler catches all
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    DATABASE = "database"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


class DocStoreError(Exception):
    """Base exception for all docstore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidCursorError(DocStoreError):
    """Pagination cursor input is malformed."""
    def __init__(self, reason: str):
        super().__init__(
            "The cursor is invalid.", "INVALID_CURSOR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DocStoreError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class ServiceUnavailableError(DocStoreError):
    """A request arrived before the lifespan finished wiring the service."""
    def __init__(self, component: str):
        super().__init__(
            "The document service is not available.",
            "SERVICE_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.component = component
