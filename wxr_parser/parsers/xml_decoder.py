"""
Decoding of raw WXR XML into :class:`wxr_parser.models.WxrDocument`.

Elements are matched by namespace URI and local name (Clark notation), so
the prefixes chosen by the exporting site are irrelevant.

Exports are frequently not well-formed: titles carry a bare ``&`` and HTML
entities such as ``&nbsp;`` outside CDATA.  Those ampersands are escaped
before parsing so the text survives verbatim, and a recovering ``lxml``
parser absorbs other minor slips.  A truncated document is still rejected.
"""

from __future__ import annotations

import re
from typing import IO, List, Optional, Tuple, Union

from lxml import etree

from wxr_parser.models.wxr_document import Author, Category, Channel, Item, PostMeta, WxrDocument
from wxr_parser.utils.errors import MalformedDocumentError

WP_NS = "http://wordpress.org/export/1.2/"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
EXCERPT_NS = "http://wordpress.org/export/1.2/excerpt/"
DC_NS = "http://purl.org/dc/elements/1.1/"

Source = Union[IO[bytes], IO[str], bytes, str]

_CDATA = re.compile(rb"(<!\[CDATA\[.*?\]\]>)", re.S)
_BARE_AMP = re.compile(rb"&(?!(?:amp|lt|gt|quot|apos);|#[0-9]+;|#x[0-9a-fA-F]+;)")

# libxml2 errors meaning the document ended early or its tags do not nest.
STRUCTURAL_ERRORS = frozenset(
    {
        "ERR_TAG_NOT_FINISHED",
        "ERR_TAG_NAME_MISMATCH",
        "ERR_LTSLASH_REQUIRED",
        "ERR_GT_REQUIRED",
        "ERR_CDATA_NOT_FINISHED",
        "ERR_COMMENT_NOT_FINISHED",
    }
)


def _wp(name: str) -> str:
    return f"{{{WP_NS}}}{name}"


def _element_text(element: etree._Element) -> str:
    # Character data only: text plus the tails of comments and children.
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def _child_text(element: etree._Element, tag: str) -> str:
    child = element.find(tag)
    if child is None:
        return ""
    return _element_text(child)


def _read_source(source: Source) -> Tuple[bytes, bool]:
    """Return the document bytes and whether they came from text."""
    data = source.read() if hasattr(source, "read") else source
    if isinstance(data, str):
        return data.encode("utf-8"), True
    return data or b"", False


def escape_bare_ampersands(data: bytes) -> bytes:
    """Escape every ``&`` outside CDATA that does not start an XML reference."""
    pieces: List[bytes] = _CDATA.split(data)
    for i in range(0, len(pieces), 2):
        pieces[i] = _BARE_AMP.sub(b"&amp;", pieces[i])
    return b"".join(pieces)


def _make_parser(from_text: bool = False) -> etree.XMLParser:
    # Text was re-encoded as UTF-8, whatever its declaration says.
    return etree.XMLParser(
        recover=True,
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
        encoding="utf-8" if from_text else None,
    )


def _structural_error(parser: etree.XMLParser) -> Optional[str]:
    for entry in parser.error_log:
        if entry.type_name in STRUCTURAL_ERRORS:
            return f"line {entry.line}: {entry.message}"
    return None


def _decode_meta(element: etree._Element) -> PostMeta:
    return PostMeta(key=_child_text(element, _wp("meta_key")), value=_child_text(element, _wp("meta_value")))


def _decode_category(element: etree._Element) -> Category:
    return Category(
        domain=element.get("domain", ""),
        nicename=element.get("nicename", ""),
        value=_element_text(element),
    )


def _decode_item(element: etree._Element) -> Item:
    return Item(
        title=_child_text(element, "title"),
        link=_child_text(element, "link"),
        guid=_child_text(element, "guid"),
        pub_date=_child_text(element, "pubDate"),
        creator=_child_text(element, f"{{{DC_NS}}}creator"),
        content_encoded=_child_text(element, f"{{{CONTENT_NS}}}encoded"),
        excerpt_encoded=_child_text(element, f"{{{EXCERPT_NS}}}encoded"),
        post_id=_child_text(element, _wp("post_id")),
        post_date=_child_text(element, _wp("post_date")),
        post_date_gmt=_child_text(element, _wp("post_date_gmt")),
        post_modified=_child_text(element, _wp("post_modified")),
        post_modified_gmt=_child_text(element, _wp("post_modified_gmt")),
        post_parent=_child_text(element, _wp("post_parent")),
        post_name=_child_text(element, _wp("post_name")),
        post_type=_child_text(element, _wp("post_type")),
        status=_child_text(element, _wp("status")),
        attachment_url=_child_text(element, _wp("attachment_url")),
        post_meta=[_decode_meta(m) for m in element.findall(_wp("postmeta"))],
        categories=[_decode_category(c) for c in element.findall("category")],
    )


def _decode_author(element: etree._Element) -> Author:
    return Author(
        id=_child_text(element, _wp("author_id")),
        login=_child_text(element, _wp("author_login")),
        display_name=_child_text(element, _wp("author_display_name")),
    )


def _decode_channel(element: Optional[etree._Element]) -> Channel:
    if element is None:
        return Channel()
    return Channel(
        title=_child_text(element, "title"),
        link=_child_text(element, "link"),
        base_site_url=_child_text(element, _wp("base_site_url")),
        base_blog_url=_child_text(element, _wp("base_blog_url")),
        items=[_decode_item(i) for i in element.findall("item")],
        authors=[_decode_author(a) for a in element.findall(_wp("author"))],
    )


def decode_document(source: Source) -> WxrDocument:
    """Decode a WXR export into a :class:`WxrDocument`.

    Args:
        source: A readable binary or text stream, or the raw document as
            ``bytes``/``str``.  Text is re-encoded as UTF-8 and parsed as
            such, ignoring any ``encoding`` in the XML declaration.

    Returns:
        The decoded document tree.

    Raises:
        MalformedDocumentError: If the input is not decodable XML (including
            truncated or badly nested documents), or the root element is not
            ``<rss>``.
    """
    data, from_text = _read_source(source)
    parser = _make_parser(from_text)
    try:
        root = etree.fromstring(escape_bare_ampersands(data), parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedDocumentError("MALFORMED_XML", str(e)) from e

    detail = _structural_error(parser)
    if detail:
        raise MalformedDocumentError("MALFORMED_XML", detail)

    if root is None:
        raise MalformedDocumentError.invalid_root("")
    local_name = etree.QName(root).localname
    if local_name != "rss":
        raise MalformedDocumentError.invalid_root(local_name)

    return WxrDocument(root=local_name, channel=_decode_channel(root.find("channel")))
