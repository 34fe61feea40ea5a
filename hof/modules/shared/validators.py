"""
Range helpers shared by the hof factories.

Construction arguments are checked by `hof.core.validation.InputValidator`,
which raises. The helpers here never raise: they saturate a value into its
allowed range for the accumulators that must never leave their bounds.

Usage
-----
    from hof.modules.shared.validators import clamp

    red = clamp(red + amount, CHANNEL_MIN, CHANNEL_MAX)
"""

from __future__ import annotations


def clamp(value: int, min_val: int, max_val: int) -> int:
    """
    Saturate ``value`` into ``[min_val, max_val]``.

    >>> clamp(300, 0, 255)
    255
    >>> clamp(-4, 0, 255)
    0
    """
    return max(min_val, min(max_val, value))


def is_clamped(value: int, min_val: int, max_val: int) -> bool:
    """True when ``clamp`` would change ``value``."""
    return not (min_val <= value <= max_val)
