"""
Pocket holding coins and trinkets.

Purpose
-------
`pocket(start)` models a tiny shop economy: ``buy()`` trades coins for one
trinket, ``sell()`` trades one trinket back for a partial refund.

Business Rules
--------------
- Neither coins nor trinkets can go negative.
- A buy the pocket cannot afford is refused and changes nothing.
- A sell with no trinkets on hand is refused and changes nothing.
- Each accepted trade updates coins and trinkets together.

Prices are fixed at 10 (buy) and 5 (sell) unless a pocket is built with
explicit ``buy_price`` / ``sell_price`` arguments.

Usage Example
-------------
>>> p = pocket(50)
>>> p.buy()
True
>>> p.coins(), p.trinkets()
(40, 1)
>>> p.sell()
True
>>> p.coins(), p.trinkets()
(45, 0)
>>> p.sell()
False
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

from hof.core.logging.logger import get_logger
from hof.core.validation import InputValidator
from hof.modules.shared.constants import TRINKET_BUY_PRICE, TRINKET_SELL_PRICE

logger = get_logger(__name__)


@dataclass(frozen=True)
class Pocket:
    """Handle returned by `pocket`."""

    buy: Callable[[], bool]
    sell: Callable[[], bool]
    coins: Callable[[], int]
    trinkets: Callable[[], int]


def pocket(
    start: int,
    buy_price: int = TRINKET_BUY_PRICE,
    sell_price: int = TRINKET_SELL_PRICE,
) -> Pocket:
    """
    Build a pocket holding ``start`` coins and no trinkets.

    Parameters
    ----------
    start : int
        Starting coins
    buy_price : int
        Coins paid per trinket
    sell_price : int
        Coins refunded per trinket

    Raises
    ------
    DomainValidationError
        If ``start`` is negative or a price is not a positive integer
    """
    InputValidator.validate_non_negative_integer(start, "start")
    InputValidator.validate_positive_integer(buy_price, "buy_price")
    InputValidator.validate_positive_integer(sell_price, "sell_price")

    coins = start
    trinkets = 0
    lock = threading.Lock()

    def buy() -> bool:
        nonlocal coins, trinkets
        with lock:
            if coins < buy_price:
                logger.debug(
                    "Buy refused: insufficient coins",
                    extra={"coins": coins, "price": buy_price},
                )
                return False
            coins -= buy_price
            trinkets += 1
        return True

    def sell() -> bool:
        nonlocal coins, trinkets
        with lock:
            if trinkets == 0:
                logger.debug("Sell refused: no trinkets", extra={"coins": coins})
                return False
            coins += sell_price
            trinkets -= 1
        return True

    def get_coins() -> int:
        return coins

    def get_trinkets() -> int:
        return trinkets

    logger.debug(
        "Pocket created",
        extra={"start": start, "buy_price": buy_price, "sell_price": sell_price},
    )
    return Pocket(buy=buy, sell=sell, coins=get_coins, trinkets=get_trinkets)
