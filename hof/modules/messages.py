"""
Message logger that tags each record with an auto-incrementing id.

>>> log = messages()
>>> log.record("first message")
'[1] first message'
>>> log.record("second message")
'[2] second message'
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from typing import Any, Callable

from hof.core.logging.logger import get_logger
from hof.modules.shared.constants import MESSAGE_FIRST_ID, MESSAGE_TEMPLATE

logger = get_logger(__name__)


@dataclass(frozen=True)
class MessageLog:
    """Handle returned by `messages`."""

    record: Callable[[Any], str]


def messages() -> MessageLog:
    ids = itertools.count(MESSAGE_FIRST_ID)
    lock = threading.Lock()

    def record(text: Any) -> str:
        with lock:
            message_id = next(ids)
        return MESSAGE_TEMPLATE.format(id=message_id, text=text)

    logger.debug("Message log created", extra={"first_id": MESSAGE_FIRST_ID})
    return MessageLog(record=record)
