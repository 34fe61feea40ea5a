"""
Counter factory.

Each call to `counter(start)` builds an independent counter whose `next()`
returns one more than the previous call.

>>> c = counter(2)
>>> c.next()
3
>>> c.next()
4
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

from hof.core.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Counter:
    """Handle returned by `counter`."""

    next: Callable[[], int]


def counter(start: int = 0) -> Counter:
    current = start
    lock = threading.Lock()

    def next_value() -> int:
        nonlocal current
        with lock:
            current += 1
            return current

    logger.debug("Counter created", extra={"start": start})
    return Counter(next=next_value)
