"""
hof Logging Subsystem

Purpose
-------
Give every hof module a named logger, and give host applications a one-call
way to see those records on the console.

Responsibilities
----------------
- `get_logger(name)` for library modules; they log at debug level only.
- `setup_logging()` / `shutdown_logging()` for the host application. hof
  never configures the root logger by itself.
- `JSONFormatter` for structured output; fields passed through
  `extra={...}` (coins, channel, raw_value...) land under `"extra"`.

Dependencies
------------
- hof.core.config.Config (LOG_LEVEL, LOG_JSON, ENVIRONMENT)
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import Logger
from typing import Any, Dict, Optional

from hof.core.config import Config


@dataclass(frozen=True)
class LoggerConfig:
    """Console handler settings derived from Config at call time."""

    CONSOLE_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s"
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    @property
    def log_level(self) -> int:
        return getattr(logging, str(Config.LOG_LEVEL).upper(), logging.INFO)

    @property
    def use_json(self) -> bool:
        if Config.LOG_JSON is None:
            return Config.is_production()
        return bool(Config.LOG_JSON)


class JSONFormatter(logging.Formatter):
    # Attributes every LogRecord carries; anything else came from `extra=`
    _RECORD_ATTRS = frozenset(
        logging.LogRecord("", 0, "", 0, "", (), None).__dict__
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


_console_handler: Optional[logging.Handler] = None


def _build_console_handler(config: LoggerConfig) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(config.log_level)

    if config.use_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(fmt=config.CONSOLE_FORMAT, datefmt=config.DATE_FORMAT)
        )

    return handler


def setup_logging() -> None:
    """Attach a console handler for hof records. Safe to call twice."""
    global _console_handler

    if _console_handler is not None:
        return

    config = LoggerConfig()
    hof_logger = logging.getLogger("hof")
    hof_logger.setLevel(config.log_level)

    _console_handler = _build_console_handler(config)
    hof_logger.addHandler(_console_handler)

    hof_logger.debug(
        "Logging initialized",
        extra={
            "environment": Config.ENVIRONMENT,
            "log_level": logging.getLevelName(config.log_level),
            "json": config.use_json,
        },
    )


def shutdown_logging() -> None:
    global _console_handler

    if _console_handler is None:
        return

    _console_handler.flush()
    logging.getLogger("hof").removeHandler(_console_handler)
    _console_handler = None


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)
