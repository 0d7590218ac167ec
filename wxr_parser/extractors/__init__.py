"""
Extractors resolving normalized post fields from WXR items.

Each field (author, excerpt, dates, taxonomies, meta, featured image) has its
own resolver with a documented fallback order.  The attachment index and the
meta lookup are the shared building blocks they rely on.
"""

from .attachments import AttachmentIndex, build_attachment_index, determine_uploads_base_url, resolve_attachment_url
from .dates import format_rfc3339, normalize_wxr_date
from .fields import (
    AuthorExtractor,
    DateExtractor,
    ExcerptExtractor,
    FeaturedImageExtractor,
    FieldExtractor,
    ImageExtractor,
    MetaExtractor,
    ModifiedDateExtractor,
)
from .meta import clean_meta_value, get_meta_value, meta_to_dict
from .taxonomy import CategoryExtractor

__all__ = [
    "AttachmentIndex",
    "AuthorExtractor",
    "CategoryExtractor",
    "DateExtractor",
    "ExcerptExtractor",
    "FeaturedImageExtractor",
    "FieldExtractor",
    "ImageExtractor",
    "MetaExtractor",
    "ModifiedDateExtractor",
    "build_attachment_index",
    "clean_meta_value",
    "determine_uploads_base_url",
    "format_rfc3339",
    "get_meta_value",
    "meta_to_dict",
    "normalize_wxr_date",
    "resolve_attachment_url",
]
