"""
Pluggable logging sink for the parser.

Library code should stay quiet unless asked, so the parser logs through a
tiny :class:`Logger` protocol and defaults to :class:`NoOpLogger`.  Callers
who want output wrap a standard :class:`logging.Logger` in
:class:`StdLoggerAdapter`, or pass any object with a compatible ``log``
method.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    def log(self, message: str, *args: Any) -> None:
        """Emit ``message`` formatted printf-style with ``args``."""


class NoOpLogger:
    """Discards every message."""

    def log(self, message: str, *args: Any) -> None:
        pass


class StdLoggerAdapter:
    """Forwards messages to a :class:`logging.Logger` at a fixed level."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO) -> None:
        self.logger = logger
        self.level = level

    def log(self, message: str, *args: Any) -> None:
        self.logger.log(self.level, message, *args)


def get_logger(logger: Optional[Any] = None) -> Logger:
    """Resolve ``logger`` to a usable sink.

    ``None`` becomes a :class:`NoOpLogger`; a bare :class:`logging.Logger`
    is wrapped in a :class:`StdLoggerAdapter`.
    """
    if logger is None:
        return NoOpLogger()
    if isinstance(logger, logging.Logger):
        return StdLoggerAdapter(logger)
    return logger
