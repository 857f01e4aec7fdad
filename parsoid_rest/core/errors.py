"""Error Hierarchy — typed, categorized exceptions for format negotiation failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Resolver misuse (missing version, unsupported format) is a programmer error:
      category INTERNAL, HTTP 500, propagated unmodified
    - Parsing a Content-Type header never raises — no error type exists for it
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ParsoidRestError base: FastAPI global handler catches all
    - InvalidArgumentError groups the two resolver failures so callers may
      catch either with one clause
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    format: str | None = None
    content_version: str | None = None
    debug_info: dict[str, Any] | None = None


class ParsoidRestError(Exception):
    """Base exception for all Parsoid REST errors."""

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
                    "format": self.context.format,
                    "content_version": self.context.content_version,
                },
            }
        }


# ─── Programmer Errors (500-level) ──────────────────────────────

class InvalidArgumentError(ParsoidRestError):
    """A negotiation function was called with arguments it cannot honor."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class MissingVersionError(InvalidArgumentError):
    """A non-wikitext format was resolved without a content version."""
    def __init__(self, format: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.format = format
        super().__init__(
            f"content_version is required for format '{format}'",
            "MISSING_CONTENT_VERSION", ctx,
        )
        self.format = format


class UnsupportedFormatError(InvalidArgumentError):
    """The format has no content-type mapping (or is not a format at all)."""
    def __init__(self, format: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.format = format
        super().__init__(
            f"Invalid format {format}", "UNSUPPORTED_FORMAT", ctx,
        )
        self.format = format


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidTransformError(ParsoidRestError):
    """Requested source→target transform is not in VALID_TRANSFORM."""
    def __init__(
        self, from_format: str, to_format: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.format = to_format
        super().__init__(
            f"Transform from '{from_format}' to '{to_format}' is not supported",
            "INVALID_TRANSFORM", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.from_format = from_format
        self.to_format = to_format
