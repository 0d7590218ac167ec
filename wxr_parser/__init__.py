"""
Top-level package for the WordPress WXR parser.

This package turns a WordPress eXtended RSS export into a list of
normalized :class:`Post` records.  Modules are split into subpackages:

* :mod:`wxr_parser.parsers` – XML decoding into the typed document model
* :mod:`wxr_parser.models` – document and output record models
* :mod:`wxr_parser.extractors` – field resolvers and the attachment index
* :mod:`wxr_parser.utils` – errors and the pluggable logging sink

Orchestration is handled in :mod:`wxr_parser.parser`; :mod:`wxr_parser.cli`
wraps it for the command line.

Usage example::

    from wxr_parser import parse

    with open("export.xml", "rb") as f:
        posts = parse(f)
    for post in posts:
        print(post.id, post.title_rendered, post.date)
"""

from .filters import DefaultFilter, Filter
from .models import Post
from .parser import ParseStats, WXRParser, parse, parse_with_cancel
from .utils.errors import MalformedDocumentError, ParseCancelledError, WXRError
from .utils.logger import Logger, NoOpLogger, StdLoggerAdapter

__all__ = [
    "DefaultFilter",
    "Filter",
    "Logger",
    "MalformedDocumentError",
    "NoOpLogger",
    "ParseCancelledError",
    "ParseStats",
    "Post",
    "StdLoggerAdapter",
    "WXRError",
    "WXRParser",
    "parse",
    "parse_with_cancel",
]
