"""
Normalization of WordPress date strings to RFC 3339.

WXR files carry dates as ``2025-06-01 14:00:51`` (``wp:post_date*``) or as
RFC 822/1123 strings (``pubDate``).  :func:`normalize_wxr_date` tries a fixed
list of layouts and re-emits the first match as ``2025-06-01T14:00:51Z``.
Strings that match nothing are returned untouched.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

_RFC3339 = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.\d+)?(Z|[+-]\d{2}:\d{2})$")
_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.\d+")

DateParser = Callable[[str], Optional[datetime]]


def format_rfc3339(dt: datetime) -> str:
    offset = dt.utcoffset() or timedelta(0)
    stamp = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if not offset:
        return stamp + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    minutes = abs(minutes)
    return f"{stamp}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_rfc3339(value: str) -> Optional[datetime]:
    match = _RFC3339.match(value)
    if not match:
        return None
    try:
        # Fractional seconds are dropped; the output carries whole seconds.
        return datetime.strptime(match.group(1) + match.group(2), "%Y-%m-%dT%H:%M:%S%z")
    except ValueError:
        return None


def _layout(fmt: str) -> DateParser:
    def parse(value: str) -> Optional[datetime]:
        try:
            dt = datetime.strptime(value, fmt)
        except ValueError:
            return None
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    return parse


def _named_zone_layout(fmt: str) -> DateParser:
    """Layout ending in a zone abbreviation such as ``MST``; recorded as UTC."""

    def parse(value: str) -> Optional[datetime]:
        head, _, zone = value.rpartition(" ")
        if not head or len(zone) < 3 or not (zone.isalpha() and zone.isupper()):
            return None
        try:
            dt = datetime.strptime(head, fmt)
        except ValueError:
            return None
        return dt.replace(tzinfo=timezone.utc)

    return parse


DATE_LAYOUTS: List[DateParser] = [
    _parse_rfc3339,
    _layout("%Y-%m-%d %H:%M:%S"),
    _layout("%Y-%m-%dT%H:%M:%S"),
    _named_zone_layout("%d %b %y %H:%M"),  # RFC 822
    _layout("%d %b %y %H:%M %z"),  # RFC 822, numeric zone
    _layout("%a, %d %b %Y %H:%M:%S %z"),
    _named_zone_layout("%a, %d %b %Y %H:%M:%S"),
]


def normalize_wxr_date(value: str) -> str:
    # Fractional seconds are accepted after HH:MM:SS in every layout.
    whole = _FRACTION.sub(r"\1", value, count=1)
    for parse in DATE_LAYOUTS:
        dt = parse(whole)
        if dt is not None:
            return format_rfc3339(dt)

    # Last resort: "<date> <time> ..." read as UTC.
    parts = whole.split()
    if len(parts) >= 2:
        try:
            dt = datetime.strptime(f"{parts[0]}T{parts[1]}Z", "%Y-%m-%dT%H:%M:%SZ")
        except ValueError:
            pass
        else:
            return format_rfc3339(dt.replace(tzinfo=timezone.utc))

    return value
