from __future__ import annotations

from typing import Dict, Iterable

from wxr_parser.models.wxr_document import PostMeta


def clean_meta_value(value: str) -> str:
    """Trim ``value``; blank strings and the literal ``null`` become ``""``."""
    trimmed = (value or "").strip()
    if not trimmed or trimmed.lower() == "null":
        return ""
    return trimmed


def get_meta_value(meta: Iterable[PostMeta], *keys: str) -> str:
    """Return the first usable meta value among ``keys``.

    Candidate keys are tried in priority order; for each one the entries are
    scanned in document order.  Keys match case-insensitively after trimming.
    Returns ``""`` when no candidate has a usable value.
    """
    entries = list(meta)
    for key in keys:
        wanted = key.strip().lower()
        for entry in entries:
            if entry.key.strip().lower() != wanted:
                continue
            value = clean_meta_value(entry.value)
            if value:
                return value
    return ""


def meta_to_dict(meta: Iterable[PostMeta]) -> Dict[str, str]:
    """Flatten meta entries into a dict; later duplicates overwrite earlier ones."""
    result: Dict[str, str] = {}
    for entry in meta:
        key = entry.key.strip()
        if key:
            result[key] = entry.value
    return result
