"""
Attachment lookups used to resolve featured images.

An export lists media files as ``attachment`` items alongside the posts that
use them.  :func:`build_attachment_index` walks the channel once and records
each attachment's URL by its own ID and under its parent post's ID.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from wxr_parser.extractors.meta import get_meta_value
from wxr_parser.models.wxr_document import Channel, Item


@dataclass(frozen=True)
class AttachmentIndex:
    urls_by_id: Dict[int, str] = field(default_factory=dict)
    urls_by_parent: Dict[int, List[str]] = field(default_factory=dict)

    def by_id(self, attachment_id: int) -> str:
        return self.urls_by_id.get(attachment_id, "")

    def first_for_parent(self, post_id: int) -> str:
        urls = self.urls_by_parent.get(post_id)
        return urls[0] if urls else ""


def determine_uploads_base_url(channel: Channel) -> str:
    """Pick the site base URL: base_site_url, then base_blog_url, then link."""
    for candidate in (channel.base_site_url, channel.base_blog_url, channel.link):
        clean = candidate.strip()
        if clean:
            return clean.rstrip("/")
    return ""


def resolve_attachment_url(item: Item, base_uploads_url: str) -> str:
    """Resolve an attachment's URL.

    Tries ``wp:attachment_url``, then ``link``, then ``guid``, and finally
    builds ``{base}/wp-content/uploads/{path}`` from ``_wp_attached_file``.
    """
    for candidate in (item.attachment_url, item.link, item.guid):
        url = candidate.strip()
        if url:
            return url

    rel = get_meta_value(item.post_meta, "_wp_attached_file")
    if rel and base_uploads_url:
        return f"{base_uploads_url}/wp-content/uploads/{rel.removeprefix('/')}"
    return ""


def build_attachment_index(channel: Channel) -> AttachmentIndex:
    urls_by_id: Dict[int, str] = {}
    urls_by_parent: Dict[int, List[str]] = {}
    base_uploads_url = determine_uploads_base_url(channel)

    for item in channel.items:
        if item.post_type != "attachment":
            continue
        url = resolve_attachment_url(item, base_uploads_url)
        if not url:
            continue
        urls_by_id[item.post_id] = url
        if item.post_parent > 0:
            urls_by_parent.setdefault(item.post_parent, []).append(url)

    return AttachmentIndex(urls_by_id=urls_by_id, urls_by_parent=urls_by_parent)
