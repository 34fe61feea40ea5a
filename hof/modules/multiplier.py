"""
Curried multiplication.

>>> multiply(3)(5)
15
"""

from __future__ import annotations

from numbers import Number
from typing import Callable


def multiply(val: Number) -> Callable[[Number], Number]:
    """
    Return a function that multiplies its argument by ``val``.

    ``val`` is bound when `multiply` is called; rebinding the caller's
    variable afterwards does not change the returned function.
    """

    def by(second: Number) -> Number:
        return val * second

    return by
