"""Error Hierarchy — typed, categorized exceptions for every walks API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404) are raised before or instead of any storage write
    - Storage errors (500) carry the underlying driver message as-is
    - to_response() produces the REST envelope used by every error handler

Design Decisions:
    - Single hierarchy with WalksError base: one FastAPI handler renders all of them
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    walk_id: str | None = None


class WalksError(Exception):
    """Base exception for all walks API errors."""

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
                    "walk_id": self.context.walk_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(WalksError):
    """Path identifier is not a well-formed walk id."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid walk id '{value}'",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.value = value


class RecordValidationError(WalksError):
    """Required creation fields missing or empty."""
    def __init__(self, missing_fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing required fields: {', '.join(missing_fields)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.missing_fields = missing_fields


class DuplicateKeywordError(WalksError):
    """Keyword already present in the walk's keyword list."""
    def __init__(self, keyword: str, context: ErrorContext | None = None):
        super().__init__(
            f"Keyword '{keyword}' already exists",
            "DUPLICATE_KEYWORD", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )
        self.keyword = keyword


class ResourceNotFoundError(WalksError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(WalksError):
    """Database operation failed. Message carries the driver's own text."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
