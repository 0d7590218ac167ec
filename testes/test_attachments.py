import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wxr_parser.extractors.attachments import (
    build_attachment_index,
    determine_uploads_base_url,
    resolve_attachment_url,
)
from wxr_parser.models.wxr_document import Channel, Item, PostMeta


def _attachment(post_id, parent=0, **fields):
    return Item(post_id=post_id, post_parent=parent, post_type="attachment", **fields)


def test_resolution_order_attachment_url_link_guid_meta():
    meta = [PostMeta(key="_wp_attached_file", value="/2024/01/a.png")]
    full = _attachment(1, attachment_url=" https://cdn/a.png ", link="https://l", guid="https://g", post_meta=meta)
    assert resolve_attachment_url(full, "https://site") == "https://cdn/a.png"

    no_url = _attachment(1, link="https://l", guid="https://g", post_meta=meta)
    assert resolve_attachment_url(no_url, "https://site") == "https://l"

    guid_only = _attachment(1, guid="https://g", post_meta=meta)
    assert resolve_attachment_url(guid_only, "https://site") == "https://g"

    meta_only = _attachment(1, post_meta=meta)
    assert resolve_attachment_url(meta_only, "https://site") == "https://site/wp-content/uploads/2024/01/a.png"
    assert resolve_attachment_url(meta_only, "") == ""


def test_uploads_base_url_prefers_site_then_blog_then_link():
    assert determine_uploads_base_url(Channel(base_site_url="https://a/", base_blog_url="https://b", link="https://c")) == "https://a"
    assert determine_uploads_base_url(Channel(base_blog_url=" https://b/ ", link="https://c")) == "https://b"
    assert determine_uploads_base_url(Channel(link="https://c/")) == "https://c"
    assert determine_uploads_base_url(Channel()) == ""


def test_index_only_covers_resolvable_attachments():
    channel = Channel(
        items=[
            Item(post_id=10, post_type="post", link="https://example.com/post"),
            _attachment(20, parent=10, attachment_url="https://cdn/one.png"),
            _attachment(21, parent=10, guid="https://cdn/two.png"),
            _attachment(22, parent=10),
            _attachment(23, attachment_url="https://cdn/orphan.png"),
        ]
    )
    index = build_attachment_index(channel)

    assert index.urls_by_id == {
        20: "https://cdn/one.png",
        21: "https://cdn/two.png",
        23: "https://cdn/orphan.png",
    }
    assert index.urls_by_parent == {10: ["https://cdn/one.png", "https://cdn/two.png"]}
    assert index.first_for_parent(10) == "https://cdn/one.png"
    assert index.first_for_parent(99) == ""
    assert index.by_id(10) == ""
