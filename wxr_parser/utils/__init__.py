"""
Utility helpers used by the parser.

This subpackage exposes the error types surfaced to callers and the
pluggable logging sink.
"""

from .errors import ERRORS, MalformedDocumentError, ParseCancelledError, WXRError
from .logger import Logger, NoOpLogger, StdLoggerAdapter, get_logger

__all__ = [
    "ERRORS",
    "Logger",
    "MalformedDocumentError",
    "NoOpLogger",
    "ParseCancelledError",
    "StdLoggerAdapter",
    "WXRError",
    "get_logger",
]
