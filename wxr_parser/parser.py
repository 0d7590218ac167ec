"""
High-level orchestration of WXR parsing.

This module defines a :class:`WXRParser` class that ties together the XML
decoder, the attachment index, the filter and the field extractors into a
single pass over an export.  Each call decodes the document, indexes its
attachments, walks the items in document order and returns the posts that
pass the filter and carry enough content to be useful.

Every collaborator is replaceable: pass a different filter, logger or
extractor to the constructor, or use the chainable ``with_*`` setters.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from wxr_parser.extractors.attachments import AttachmentIndex, build_attachment_index
from wxr_parser.extractors.fields import (
    AuthorExtractor,
    DateExtractor,
    ExcerptExtractor,
    FeaturedImageExtractor,
    FieldExtractor,
    ImageExtractor,
    MetaExtractor,
    ModifiedDateExtractor,
)
from wxr_parser.extractors.taxonomy import CategoryExtractor
from wxr_parser.filters import DefaultFilter, Filter
from wxr_parser.models.post import Post
from wxr_parser.models.wxr_document import Item
from wxr_parser.parsers.xml_decoder import Source, decode_document
from wxr_parser.utils.errors import ParseCancelledError
from wxr_parser.utils.logger import Logger, get_logger


class CancelSignal(Protocol):
    def is_set(self) -> bool: ...


@dataclass
class ParseStats:
    """Diagnostic tallies for one parse call.  Never affects the output."""

    total: int = 0
    extracted: int = 0
    skipped_by_reason: Counter = field(default_factory=Counter)
    skipped_by_type: Counter = field(default_factory=Counter)
    skipped_by_status: Counter = field(default_factory=Counter)

    @property
    def skipped(self) -> int:
        return sum(self.skipped_by_reason.values())


def _cancelled(signal: Optional[CancelSignal]) -> bool:
    return signal is not None and signal.is_set()


class WXRParser:
    """
    Configurable parser for WordPress WXR exports.  Holds the logger, the
    item filter and the per-field extractors; all per-document state (the
    attachment index, the skip counters) lives inside a single call.
    """

    def __init__(
        self,
        *,
        logger: Optional[Any] = None,
        item_filter: Optional[Filter] = None,
        author_extractor: Optional[FieldExtractor] = None,
        excerpt_extractor: Optional[FieldExtractor] = None,
        date_extractor: Optional[FieldExtractor] = None,
        modified_date_extractor: Optional[FieldExtractor] = None,
        featured_image_extractor: Optional[ImageExtractor] = None,
    ) -> None:
        self.logger: Logger = get_logger(logger)
        self.item_filter: Filter = item_filter or DefaultFilter()
        self.author_extractor = author_extractor or AuthorExtractor()
        self.excerpt_extractor = excerpt_extractor or ExcerptExtractor()
        self.date_extractor = date_extractor or DateExtractor()
        self.modified_date_extractor = modified_date_extractor or ModifiedDateExtractor()
        self.featured_image_extractor = featured_image_extractor or FeaturedImageExtractor()
        self.category_extractor = CategoryExtractor()
        self.meta_extractor = MetaExtractor()
        self.last_stats = ParseStats()

    @classmethod
    def from_config(cls, config: Dict[str, Any], *, logger: Optional[Any] = None) -> "WXRParser":
        flt = config.get("filter", {})
        return cls(
            logger=logger,
            item_filter=DefaultFilter(post_type=flt.get("post_type", "post"), status=flt.get("status", "publish")),
        )

    def set_logger(self, logger: Optional[Any]) -> "WXRParser":
        self.logger = get_logger(logger)
        return self

    def with_filter(self, item_filter: Optional[Filter]) -> "WXRParser":
        self.item_filter = item_filter or DefaultFilter()
        return self

    def with_author_extractor(self, extractor: Optional[FieldExtractor]) -> "WXRParser":
        self.author_extractor = extractor or AuthorExtractor()
        return self

    def with_excerpt_extractor(self, extractor: Optional[FieldExtractor]) -> "WXRParser":
        self.excerpt_extractor = extractor or ExcerptExtractor()
        return self

    def with_date_extractor(self, extractor: Optional[FieldExtractor]) -> "WXRParser":
        self.date_extractor = extractor or DateExtractor()
        return self

    def with_modified_date_extractor(self, extractor: Optional[FieldExtractor]) -> "WXRParser":
        self.modified_date_extractor = extractor or ModifiedDateExtractor()
        return self

    def with_featured_image_extractor(self, extractor: Optional[ImageExtractor]) -> "WXRParser":
        self.featured_image_extractor = extractor or FeaturedImageExtractor()
        return self

    def transform_item(self, item: Item, index: AttachmentIndex) -> Post:
        return Post(
            id=item.post_id,
            title_rendered=item.title,
            content_rendered=item.content_encoded,
            excerpt=self.excerpt_extractor.extract(item),
            slug=item.post_name,
            link=item.link,
            author=self.author_extractor.extract(item),
            date=self.date_extractor.extract(item),
            modified_date=self.modified_date_extractor.extract(item),
            categories=self.category_extractor.extract_categories(item) or [],
            tags=self.category_extractor.extract_tags(item) or [],
            guid=item.guid,
            parent_id=item.post_parent,
            meta=self.meta_extractor.extract(item) or {},
            featured_image=self.featured_image_extractor.extract(item, index),
        )

    def _skip_reason(self, item: Item, stats: ParseStats) -> Optional[str]:
        if not self.item_filter.should_include(item):
            self.logger.log("Skipping item %d: post_type=%r status=%r", item.post_id, item.post_type, item.status)
            expected_type = getattr(self.item_filter, "post_type", "")
            if expected_type and item.post_type != expected_type:
                stats.skipped_by_type[item.post_type] += 1
                return "type"
            stats.skipped_by_status[item.status] += 1
            return "status"

        if item.post_id == 0:
            self.logger.log("Skipping item with missing post_id")
            return "missing_id"

        if not item.title and not item.content_encoded and not item.excerpt_encoded:
            self.logger.log("Skipping post %d: missing title, content, and excerpt", item.post_id)
            return "empty"

        return None

    def parse(self, source: Source) -> List[Post]:
        """
        Parse a WXR export and return its published posts in document order.

        :param source: A readable stream, or the raw document as bytes/str.
        :return: A list of :class:`Post`; empty when nothing qualifies.
        :raises MalformedDocumentError: If the input is not XML or the root
            element is not ``<rss>``.
        """
        return self._run(source, None)

    def parse_with_cancel(self, cancel: Optional[CancelSignal], source: Source) -> List[Post]:
        """
        Like :meth:`parse`, polling ``cancel`` (e.g. a :class:`threading.Event`)
        before decoding, after decoding and before each item.

        :raises ParseCancelledError: When the signal is set.  The exception's
            ``posts`` attribute carries the posts extracted so far.
        """
        return self._run(source, cancel)

    def _run(self, source: Source, cancel: Optional[CancelSignal]) -> List[Post]:
        stats = ParseStats()
        self.last_stats = stats

        if _cancelled(cancel):
            raise ParseCancelledError([])

        self.logger.log("Starting WXR parsing")
        document = decode_document(source)

        if _cancelled(cancel):
            raise ParseCancelledError([])

        items = document.channel.items
        stats.total = len(items)
        self.logger.log("Parsed WXR document, found %d items", len(items))

        index = build_attachment_index(document.channel)
        posts: List[Post] = []

        for item in items:
            if _cancelled(cancel):
                stats.extracted = len(posts)
                self.logger.log("Parsing cancelled, returning %d posts parsed so far", len(posts))
                raise ParseCancelledError(posts)

            reason = self._skip_reason(item, stats)
            if reason is not None:
                stats.skipped_by_reason[reason] += 1
                continue

            post = self.transform_item(item, index)
            if not post.link and not post.slug:
                self.logger.log("Warning: Post %d has neither Link nor Slug - URL construction may fail", post.id)
            posts.append(post)

        stats.extracted = len(posts)
        self.logger.log(
            "WXR parsing complete: %d posts extracted, %d items skipped", len(posts), stats.skipped
        )
        if stats.skipped_by_type:
            self.logger.log("Skipped by type: %s", dict(stats.skipped_by_type))
        if stats.skipped_by_status:
            self.logger.log("Skipped by status: %s", dict(stats.skipped_by_status))

        return posts


def parse(source: Source) -> List[Post]:
    """Parse ``source`` with a default :class:`WXRParser`."""
    return WXRParser().parse(source)


def parse_with_cancel(cancel: Optional[CancelSignal], source: Source) -> List[Post]:
    """Parse ``source`` with a default :class:`WXRParser`, honouring ``cancel``."""
    return WXRParser().parse_with_cancel(cancel, source)
