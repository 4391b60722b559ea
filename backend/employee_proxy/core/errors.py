"""Error Hierarchy — typed, categorized exceptions raised at the API boundary.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are only raised by the boundary layer; client and service return outcomes
    - to_response() produces the REST error envelope
    - UpstreamRateLimitedError exposes retry_after_seconds for the Retry-After header
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmployeeProxyError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    RATE_LIMIT = "rate_limit"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context carried alongside an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    operation: str | None = None
    upstream_status: int | None = None
    retry_after_seconds: int | None = None
    debug_info: dict[str, Any] | None = None


class EmployeeProxyError(Exception):
    """Base exception for all employee proxy errors."""

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
                    "employee_id": self.context.employee_id,
                    "operation": self.context.operation,
                    "retry_after_seconds": self.context.retry_after_seconds,
                },
            }
        }

    def response_headers(self) -> dict[str, str]:
        """Extra HTTP headers for the error response (none by default)."""
        return {}


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(EmployeeProxyError):
    """Requested resource does not exist upstream."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


class EmployeeNotCreatedError(EmployeeProxyError):
    """Upstream accepted the create call but returned no employee."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Employee could not be created",
            "EMPLOYEE_NOT_CREATED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class UpstreamRateLimitedError(EmployeeProxyError):
    """Upstream answered 429 — forwarded to the caller, never retried."""
    def __init__(
        self,
        retry_after_seconds: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_seconds = retry_after_seconds
        super().__init__(
            "Rate limit exceeded. Please retry after some time.",
            "UPSTREAM_RATE_LIMITED", ErrorCategory.RATE_LIMIT,
            ErrorSeverity.WARNING, ctx, 429,
        )
        self.retry_after_seconds = retry_after_seconds

    def response_headers(self) -> dict[str, str]:
        if self.retry_after_seconds is None:
            return {}
        return {"Retry-After": str(self.retry_after_seconds)}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class UpstreamServiceError(EmployeeProxyError):
    """Upstream call failed for any reason other than 404/429."""
    def __init__(
        self,
        reason: str,
        upstream_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = upstream_status
        super().__init__(
            f"Upstream employee service error: {reason}",
            "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.upstream_status = upstream_status
