"""Error Hierarchy: typed, categorized exceptions for pattern-gallery failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Precondition violations are CRITICAL: they signal a programmer error, never a recoverable state
    - to_dict() produces the structured envelope that run_demo logs

Design Decisions:
    - Single hierarchy with PatternError base
    - ErrorContext as dataclass: observability data without coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    PRECONDITION = "precondition"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    capability: str | None = None
    variant: str | None = None
    debug_info: dict[str, Any] | None = None


class PatternError(Exception):
    """Base exception for all pattern-gallery errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to the structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "capability": self.context.capability,
                    "variant": self.context.variant,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Precondition Errors ────────────────────────────────────────

class UnboundComposerError(PatternError):
    """Composer operation invoked before any implementation was bound."""
    def __init__(self, capability: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.capability = capability
        super().__init__(
            f"No {capability} is bound. Bind an implementation before operating.",
            "UNBOUND_COMPOSER", ErrorCategory.PRECONDITION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.capability = capability


# ─── Validation Errors ──────────────────────────────────────────

class CapabilityMismatchError(PatternError, TypeError):
    """Object bound to a composer does not implement the declared capability."""
    def __init__(
        self, capability: str, received: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.capability = capability
        ctx.variant = received
        super().__init__(
            f"{received} does not implement {capability}",
            "CAPABILITY_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.capability = capability
        self.received = received


class InvalidPriceError(PatternError, ValueError):
    """Item price is not a positive amount."""
    def __init__(self, price: object, context: ErrorContext | None = None):
        super().__init__(
            f"Item price must be a positive number, got {price!r}",
            "INVALID_PRICE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.price = price
