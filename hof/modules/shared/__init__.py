"""
Shared domain pieces for the hof factories: exceptions, range helpers, constants.
"""

from hof.modules.shared.exceptions import (
    DomainValidationError,
    ErrorSeverity,
    HofDomainException,
)
from hof.modules.shared.validators import clamp, is_clamped

__all__ = [
    "HofDomainException",
    "DomainValidationError",
    "ErrorSeverity",
    "clamp",
    "is_clamped",
]
