"""
Domain exceptions for the hof factories.

Purpose
-------
Define the structured exception hierarchy raised when a factory is asked to
build an instance that would break its own invariants (a pocket holding
negative coins, a lives tracker starting below zero).

Runtime operations on a built instance never raise for bad input; they report
failure through boolean sentinels instead. Exceptions are reserved for
construction contracts.

Design Notes
------------
- All domain exceptions inherit from `HofDomainException`.
- Each exception carries:
  - `message`: human-readable description
  - `details`: additional structured context (dict-like)
  - `severity`: `ErrorSeverity` value for logging
  - `is_retryable`: whether the operation can be retried
  - `error_code`: short, stable identifier for programmatic use
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for logging."""

    DEBUG = "debug"
    INFO = "info"  # Caller supplied bad construction arguments
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class HofDomainException(Exception):
    """
    Base exception for all hof domain-level errors.

    Args:
        message: Human-readable error message
        details: Additional structured data about the error (dict-like)
        severity: Error severity level for logging handlers
        is_retryable: Whether the operation can be retried
        error_code: Optional code for programmatic handling

    Example:
        >>> raise HofDomainException(
        ...     "Pocket cannot be built",
        ...     {"reason": "negative start"}
        ... )
    """

    DEFAULT_SEVERITY: ErrorSeverity = ErrorSeverity.ERROR
    DEFAULT_RETRYABLE: bool = False

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[ErrorSeverity] = None,
        is_retryable: Optional[bool] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message: str = message
        self.details: Dict[str, Any] = details or {}
        self.severity: ErrorSeverity = severity or self.DEFAULT_SEVERITY
        self.is_retryable: bool = (
            is_retryable if is_retryable is not None else self.DEFAULT_RETRYABLE
        )
        self.error_code: str = error_code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
        }

    def __str__(self) -> str:
        details_str = f" | Details: {self.details}" if self.details else ""
        return f"[{self.error_code}] {self.message}{details_str}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"severity={self.severity.value!r}, "
            f"is_retryable={self.is_retryable!r}"
            ")"
        )


class DomainValidationError(HofDomainException):
    """
    Raised when a factory argument violates the instance's invariants.

    Args:
        message: Explanation of why validation failed
        field: Name of the argument that failed validation (if applicable)
        value: The rejected value
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO
    DEFAULT_RETRYABLE = False

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        error_code = f"VALIDATION_{field.upper()}" if field else "VALIDATION"
        super().__init__(
            message,
            details={"field": field, "value": value},
            error_code=error_code,
        )
