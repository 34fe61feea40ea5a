"""
Input Validation Layer for hof

Purpose
-------
Single source of truth for low-level input checks used by the factories.

Two flavours are offered:

- `matches_allowed_chars` answers yes/no and never raises. Runtime
  operations (`user().set_name`) use it to return a boolean sentinel.
- `validate_*` methods raise `DomainValidationError`. Factories use them
  for construction preconditions.

Observability
-------------
Every validation failure is logged at debug level with:
  - field_name
  - raw_value (repr)
  - reason/message
"""

from __future__ import annotations

import re
from typing import Any, NoReturn

from hof.core.logging.logger import get_logger
from hof.modules.shared.exceptions import DomainValidationError

logger = get_logger(__name__)


def _raise_validation_error(field_name: str, value: Any, message: str) -> NoReturn:
    """Log and raise a DomainValidationError."""
    logger.debug(
        "Input validation failed",
        extra={
            "field_name": field_name,
            "raw_value": repr(value),
            "reason": message,
        },
    )
    raise DomainValidationError(f"{field_name}: {message}", field=field_name, value=value)


class InputValidator:
    """
    Centralized input validation.

    All methods are stateless and deterministic.
    """

    @staticmethod
    def matches_allowed_chars(value: Any, allowed_chars: str) -> bool:
        """
        Check that ``value`` is a non-empty string made only of ``allowed_chars``.

        Args:
            value: Candidate value (non-strings never match)
            allowed_chars: Regex character class body (e.g., 'A-Za-z ')

        Returns:
            True if every character is allowed and there is at least one
        """
        if not isinstance(value, str):
            return False

        # fullmatch: "$" alone would also accept a trailing newline
        return re.fullmatch(f"[{allowed_chars}]+", value) is not None

    @staticmethod
    def validate_non_negative_integer(value: Any, field_name: str) -> int:
        """
        Validate that value is an integer >= 0.

        Raises:
            DomainValidationError: If value is not an int or is negative
        """
        if isinstance(value, bool) or not isinstance(value, int):
            _raise_validation_error(
                field_name,
                value,
                f"Must be a whole number, got {type(value).__name__}",
            )

        if value < 0:
            _raise_validation_error(
                field_name,
                value,
                f"Must be at least 0, got {value}",
            )

        return value

    @staticmethod
    def validate_positive_integer(value: Any, field_name: str) -> int:
        """Validate that value is an integer >= 1."""
        InputValidator.validate_non_negative_integer(value, field_name)

        if value == 0:
            _raise_validation_error(field_name, value, "Cannot be zero")

        return value
