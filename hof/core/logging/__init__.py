"""
hof Logging Infrastructure

Exports the module logger accessor and the console setup helpers a host
application calls.
"""

from hof.core.logging.logger import (
    JSONFormatter,
    LoggerConfig,
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "setup_logging",
    "shutdown_logging",
    "get_logger",
    "JSONFormatter",
    "LoggerConfig",
]
