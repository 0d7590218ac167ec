"""
Field resolvers applied to each post item.

Every extractor is a small class with an ``extract`` method implementing one
fallback chain.  The parser depends only on the protocols declared here, so
a caller can replace a single rule (say, a site that stores its byline under
a different meta key) without reimplementing the rest.
"""

from __future__ import annotations

from typing import Dict, Protocol, Sequence

from wxr_parser.extractors.attachments import AttachmentIndex
from wxr_parser.extractors.dates import normalize_wxr_date
from wxr_parser.extractors.meta import get_meta_value, meta_to_dict
from wxr_parser.models.wxr_document import Item


class FieldExtractor(Protocol):
    def extract(self, item: Item) -> str: ...


class ImageExtractor(Protocol):
    def extract(self, item: Item, index: AttachmentIndex) -> str: ...


class AuthorExtractor:
    """Prefer byline meta fields, then ``dc:creator``."""

    meta_keys: Sequence[str] = ("redator", "autor", "author_name")

    def extract(self, item: Item) -> str:
        author = get_meta_value(item.post_meta, *self.meta_keys)
        if not author:
            author = item.creator
        return author.strip()


class ExcerptExtractor:
    """Prefer ``excerpt:encoded``, then the ``subtitulo`` meta field.

    The excerpt is returned as written; trimming is only used to decide
    whether it is blank.
    """

    meta_keys: Sequence[str] = ("subtitulo",)

    def extract(self, item: Item) -> str:
        excerpt = item.excerpt_encoded
        if not excerpt.strip():
            excerpt = get_meta_value(item.post_meta, *self.meta_keys)
        return excerpt


class DateExtractor:
    """Publication date: ``post_date_gmt``, ``post_date``, then ``pubDate``."""

    def extract(self, item: Item) -> str:
        value = item.post_date_gmt or item.post_date or item.pub_date
        return normalize_wxr_date(value) if value else ""


class ModifiedDateExtractor:
    def extract(self, item: Item) -> str:
        value = item.post_modified_gmt or item.post_modified
        return normalize_wxr_date(value) if value else ""


class MetaExtractor:
    def extract(self, item: Item) -> Dict[str, str]:
        return meta_to_dict(item.post_meta)


class FeaturedImageExtractor:
    """Resolve the featured image URL of a post.

    Sources, in order:

    1. Custom meta fields (``banner_da_materia``, ``banner_old``,
       ``link_do_banner``)
    2. ``_thumbnail_id`` looked up in the attachment index
    3. The first attachment whose parent is this post
    """

    meta_keys: Sequence[str] = ("banner_da_materia", "banner_old", "link_do_banner")

    def extract(self, item: Item, index: AttachmentIndex) -> str:
        image = get_meta_value(item.post_meta, *self.meta_keys)
        if image:
            return image

        thumb_id = get_meta_value(item.post_meta, "_thumbnail_id")
        if thumb_id:
            try:
                url = index.by_id(int(thumb_id))
            except ValueError:
                url = ""
            if url:
                return url

        return index.first_for_parent(item.post_id)
