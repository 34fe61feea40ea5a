"""
Lives tracker for a game session.

Purpose
-------
Count down remaining lives and restore the starting amount on restart.

Business Rules
--------------
- ``died()`` removes one life and returns what is left.
- The stored count floors at 0; dying with no lives left is a no-op, so a
  later restart is the only way back.
- ``restart()`` resets to the starting amount given at construction.

Usage Example
-------------
>>> tracker = lives(5)
>>> tracker.died()
4
>>> tracker.died()
3
>>> tracker.restart()
>>> tracker.left()
5
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

from hof.core.logging.logger import get_logger
from hof.core.validation import InputValidator
from hof.modules.shared.constants import LIVES_FLOOR

logger = get_logger(__name__)


@dataclass(frozen=True)
class Lives:
    """Handle returned by `lives`."""

    died: Callable[[], int]
    left: Callable[[], int]
    restart: Callable[[], None]


def lives(start: int) -> Lives:
    """
    Build a lives tracker starting at ``start``.

    Raises
    ------
    DomainValidationError
        If ``start`` is not a non-negative integer
    """
    InputValidator.validate_non_negative_integer(start, "start")

    current = start
    lock = threading.Lock()

    def died() -> int:
        nonlocal current
        with lock:
            if current == LIVES_FLOOR:
                logger.debug("Died with no lives left", extra={"start": start})
            current = max(current - 1, LIVES_FLOOR)
            return current

    def left() -> int:
        return current

    def restart() -> None:
        nonlocal current
        with lock:
            current = start

    logger.debug("Lives tracker created", extra={"start": start})
    return Lives(died=died, left=left, restart=restart)
