"""
Exceptions raised to callers of the WXR parser.

Only two conditions ever reach a caller:

``MalformedDocumentError``
    The input could not be decoded as XML, or its root element is not
    ``<rss>``.  Fatal to the call; no posts are returned.

``ParseCancelledError``
    The caller's cancellation signal fired.  Posts extracted before the
    signal was observed are attached to the exception as ``posts``.

Everything else (unparseable dates, missing optional fields, unresolved
featured images) degrades to empty values inside the extractors.

The ``ERRORS`` dictionary maps error codes to human readable messages.  Codes
not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from wxr_parser.models.post import Post

ERRORS: Dict[str, str] = {
    "MALFORMED_XML": "failed to parse WXR XML",
    "INVALID_ROOT": "invalid WXR XML: root element is not <rss>",
    "CANCELLED": "parsing cancelled",
}


class WXRError(Exception):
    """Base class for errors raised by :mod:`wxr_parser`."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        message = ERRORS.get(code, code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(f"wxr: {message}")


class MalformedDocumentError(WXRError):
    def __init__(self, code: str = "MALFORMED_XML", detail: Optional[str] = None, *, root: str = "") -> None:
        self.root = root
        super().__init__(code, detail)

    @classmethod
    def invalid_root(cls, root: str) -> "MalformedDocumentError":
        return cls("INVALID_ROOT", f"got {root!r}", root=root)


class ParseCancelledError(WXRError):
    """Raised when parsing is cancelled; ``posts`` holds any partial output."""

    def __init__(self, posts: Optional[List["Post"]] = None) -> None:
        self.posts: List["Post"] = list(posts or [])
        super().__init__("CANCELLED", f"{len(self.posts)} posts parsed before cancellation")
