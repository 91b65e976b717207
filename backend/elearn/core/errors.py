"""Error Hierarchy — typed, numbered exceptions for every ledger failure mode.

Invariants:
    - Every domain error carries one of three numeric codes: 101 NotFound,
      102 AlreadyExists, 103 Unauthorized
    - Every error has a reason (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) leave state untouched; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ElearnError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Validation failures keep code 103 (InvalidInputError, InsufficientBalanceError subclass
      UnauthorizedError) but carry their own reason, so callers can tell the causes apart
      while the numeric contract stays stable
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any
from datetime import datetime, timezone


class ErrorCode(IntEnum):
    """Numeric codes surfaced to callers."""
    NOT_FOUND = 101
    ALREADY_EXISTS = 102
    UNAUTHORIZED = 103
    INTERNAL = 500


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    account: str | None = None
    operation: str | None = None
    course_id: int | None = None
    debug_info: dict[str, Any] | None = None


class ElearnError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        reason: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.reason = reason
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": int(self.code),
                "name": self.code.name,
                "reason": self.reason,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "account": self.context.account,
                    "operation": self.context.operation,
                    "course_id": self.context.course_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ElearnError):
    """Referenced profile, course, enrollment or post does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            ErrorCode.NOT_FOUND, f"{resource_type.lower().replace(' ', '_')}_not_found",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AlreadyExistsError(ElearnError):
    """Entity already exists for the given key."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' already exists",
            ErrorCode.ALREADY_EXISTS, f"{resource_type.lower().replace(' ', '_')}_exists",
            ErrorCategory.CONFLICT, ErrorSeverity.ERROR, context, 409,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnauthorizedError(ElearnError):
    """Caller lacks the role the operation requires."""
    def __init__(
        self,
        message: str,
        reason: str = "unauthorized",
        category: ErrorCategory = ErrorCategory.AUTHORIZATION,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, ErrorCode.UNAUTHORIZED, reason, category,
            ErrorSeverity.ERROR, context, 403,
        )


class InvalidInputError(UnauthorizedError):
    """Input fails a validation check folded into the Unauthorized code."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, f"invalid_{field}", ErrorCategory.VALIDATION, context,
        )
        self.field = field


class InsufficientBalanceError(UnauthorizedError):
    """Withdrawal exceeds the instructor's available earnings."""
    def __init__(self, requested: int, available: int, context: ErrorContext | None = None):
        super().__init__(
            f"Withdrawal of {requested} exceeds available balance {available}",
            "insufficient_balance", ErrorCategory.VALIDATION, context,
        )
        self.requested = requested
        self.available = available


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ElearnError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            ErrorCode.INTERNAL, "database_error", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
