"""
RGB color accumulator.

Purpose
-------
`color(r, g, b)` holds three 8-bit channels. Each ``incr_*`` adds a (possibly
negative) amount to one channel and saturates the result into [0, 255], so a
channel can never be read outside that range.

Business Rules
--------------
- Construction values are clamped too; ``color(300, -5, 18)`` starts at
  ``(255, 0, 18)``.
- Increments saturate rather than wrap: ``incr_red(1000)`` from any state
  reads back 255.

Usage Example
-------------
>>> c = color(150, 200, 18)
>>> c.incr_red(12)
162
>>> c.incr_green(30)
230
>>> c.incr_blue(-9)
9
>>> c.red(), c.green(), c.blue()
(162, 230, 9)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Tuple

from hof.core.logging.logger import get_logger
from hof.modules.shared.constants import CHANNEL_MAX, CHANNEL_MIN
from hof.modules.shared.validators import clamp, is_clamped

logger = get_logger(__name__)


@dataclass(frozen=True)
class Color:
    """Handle returned by `color`."""

    incr_red: Callable[[int], int]
    incr_green: Callable[[int], int]
    incr_blue: Callable[[int], int]
    red: Callable[[], int]
    green: Callable[[], int]
    blue: Callable[[], int]


def _channel(
    channel: str,
    initial: int,
    lock: threading.Lock,
) -> Tuple[Callable[[int], int], Callable[[], int]]:
    """
    Build the (increment, read) closure pair for a single channel.

    The three channels of one color share ``lock``.
    """
    if is_clamped(initial, CHANNEL_MIN, CHANNEL_MAX):
        logger.debug(
            "Clamped initial channel value",
            extra={"channel": channel, "raw_value": initial},
        )
    value = clamp(initial, CHANNEL_MIN, CHANNEL_MAX)

    def incr(amount: int) -> int:
        nonlocal value
        with lock:
            raw = value + amount
            value = clamp(raw, CHANNEL_MIN, CHANNEL_MAX)
            if value != raw:
                logger.debug(
                    "Clamped channel increment",
                    extra={"channel": channel, "amount": amount, "raw_value": raw},
                )
            return value

    def read() -> int:
        return value

    return incr, read


def color(r: int, g: int, b: int) -> Color:
    lock = threading.Lock()

    incr_red, red = _channel("red", r, lock)
    incr_green, green = _channel("green", g, lock)
    incr_blue, blue = _channel("blue", b, lock)

    return Color(
        incr_red=incr_red,
        incr_green=incr_green,
        incr_blue=incr_blue,
        red=red,
        green=green,
        blue=blue,
    )
