"""
Validation layer for hof.

Exports
-------
- InputValidator: yes/no character checks and raising integer checks
"""

from hof.core.validation.input_validator import InputValidator

__all__ = [
    "InputValidator",
]
