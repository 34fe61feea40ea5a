"""
Validated name holder.

A name is accepted only when it is one or more ASCII letters or spaces.
Rejected names leave the stored name untouched.

>>> u = user()
>>> u.set_name("Francis Bacon")
True
>>> u.get_name()
'Francis Bacon'
>>> u.set_name("123 hi")
False
>>> u.get_name()
'Francis Bacon'
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable

from hof.core.logging.logger import get_logger
from hof.core.validation import InputValidator
from hof.modules.shared.constants import NAME_ALLOWED_CHARS

logger = get_logger(__name__)


@dataclass(frozen=True)
class User:
    """Handle returned by `user`."""

    set_name: Callable[[Any], bool]
    get_name: Callable[[], str]


def user() -> User:
    name = ""
    lock = threading.Lock()

    def set_name(value: Any) -> bool:
        nonlocal name
        if not InputValidator.matches_allowed_chars(value, NAME_ALLOWED_CHARS):
            logger.debug("Rejected user name", extra={"raw_value": repr(value)})
            return False

        with lock:
            name = value
        return True

    def get_name() -> str:
        return name

    return User(set_name=set_name, get_name=get_name)
