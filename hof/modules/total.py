"""
Discount calculator over a fixed base amount.

Purpose
-------
`total(amount)` remembers ``amount`` and answers "what does this cost at a
given discount rate?" as many times as asked. The base is never modified,
so discounts do not stack.

Usage Example
-------------
>>> tot = total(20)
>>> tot.discount(0.50)
10.0
>>> tot.discount(0.20)
16.0

Notes
-----
``rate`` is not validated. A rate above 1 yields a negative price and a
negative rate yields a surcharge.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from typing import Callable

from hof.core.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Total:
    """Handle returned by `total`."""

    discount: Callable[[Number], Number]


def total(amount: Number) -> Total:
    """
    Build a discount calculator for ``amount``.

    Parameters
    ----------
    amount : Number
        Base price every discount is computed from

    Returns
    -------
    Total
        Handle exposing ``discount(rate) -> amount - rate * amount``
    """

    def discount(rate: Number) -> Number:
        return amount - (rate * amount)

    logger.debug("Total created", extra={"amount": amount})
    return Total(discount=discount)
