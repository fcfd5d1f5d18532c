"""Error Hierarchy — typed, categorized exceptions for every user-profile failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - code is the stable, machine-readable error kind; message is for humans
    - Request-level rejections map to 4xx; infrastructure failures map to 5xx
    - to_response() produces the REST envelope consumed by api/error_handlers.py

Design Decisions:
    - Single hierarchy with UserProfileError base: one FastAPI handler renders all
      (ADR: uniform error shape)
    - http_status lives on the error type, so translation is a lookup, not a
      chain of isinstance checks
    - UserNotFoundError answers 400 rather than 404 to keep the status codes
      existing clients already handle
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None


class UserProfileError(Exception):
    """Base exception for all user-profile errors."""

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

    def details(self) -> list[dict] | None:
        """Per-field details for the response envelope. None when not applicable."""
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        details = self.details()
        if details is not None:
            body["details"] = details
        return {"error": body}


# ─── Request Errors (400-level) ─────────────────────────────────

@dataclass(frozen=True)
class FieldViolation:
    """One failed field check: wire field name + human message."""
    field: str
    message: str


class FieldValidationError(UserProfileError):
    """Request fields failed shape or format checks before reaching the service."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        super().__init__(
            "; ".join(f"{v.field}: {v.message}" for v in violations),
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = list(violations)

    def details(self) -> list[dict]:
        return [{"field": v.field, "message": v.message} for v in self.violations]


class EmailAlreadyExistsError(UserProfileError):
    """Creation attempted with an email that is already registered."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            f"This email already exists: {email}",
            "EMAIL_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.email = email


class UserLowAgeError(UserProfileError):
    """Creation attempted for a user younger than the configured minimum age."""
    def __init__(self, min_age: int, context: ErrorContext | None = None):
        super().__init__(
            f"User must be at least {min_age} years old.",
            "USER_LOW_AGE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.min_age = min_age


class UserNotFoundError(UserProfileError):
    """Target user id does not exist."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        ctx = (
            replace(context, user_id=user_id) if context
            else ErrorContext(user_id=user_id)
        )
        super().__init__(
            f"User with ID: {user_id} was not found",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.user_id = user_id


class InvalidDateRangeError(UserProfileError):
    """Range search start date lies after its end date."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Start date must be before end date",
            "INVALID_DATE_RANGE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserProfileError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
