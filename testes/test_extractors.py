import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wxr_parser.extractors.attachments import AttachmentIndex
from wxr_parser.extractors.fields import (
    AuthorExtractor,
    DateExtractor,
    ExcerptExtractor,
    FeaturedImageExtractor,
    ModifiedDateExtractor,
)
from wxr_parser.extractors.taxonomy import CategoryExtractor
from wxr_parser.filters import DefaultFilter
from wxr_parser.models.wxr_document import Category, Item, PostMeta


def _item(meta=(), **fields):
    return Item(post_meta=[PostMeta(key=k, value=v) for k, v in meta], **fields)


def test_author_prefers_meta_then_creator():
    ext = AuthorExtractor()
    assert ext.extract(_item(meta=[("autor", "Meta Author")], creator="Creator")) == "Meta Author"
    assert ext.extract(_item(creator="  John Doe ")) == "John Doe"
    assert ext.extract(_item()) == ""


def test_excerpt_falls_back_to_subtitulo_and_keeps_whitespace():
    ext = ExcerptExtractor()
    assert ext.extract(_item(excerpt_encoded="  Kept as is ")) == "  Kept as is "
    assert ext.extract(_item(meta=[("subtitulo", "Resumo curto")], excerpt_encoded="  ")) == "Resumo curto"
    assert ext.extract(_item()) == ""


def test_date_fallback_chain():
    ext = DateExtractor()
    assert ext.extract(_item(post_date_gmt="2025-06-01 14:00:51", post_date="2025-06-01 11:00:51")) == "2025-06-01T14:00:51Z"
    assert ext.extract(_item(post_date="2025-06-01 11:00:51")) == "2025-06-01T11:00:51Z"
    assert ext.extract(_item(pub_date="Sun, 01 Jun 2025 14:00:51 +0000")) == "2025-06-01T14:00:51Z"
    assert ext.extract(_item()) == ""


def test_modified_date_fallback_chain():
    ext = ModifiedDateExtractor()
    assert ext.extract(_item(post_modified_gmt="2025-06-02 10:00:00", post_modified="2025-06-02 07:00:00")) == "2025-06-02T10:00:00Z"
    assert ext.extract(_item(post_modified="2025-06-02 07:00:00")) == "2025-06-02T07:00:00Z"
    assert ext.extract(_item(pub_date="Sun, 01 Jun 2025 14:00:51 +0000")) == ""


def test_categories_and_tags_by_domain():
    item = Item(
        categories=[
            Category(domain="category", value=" News "),
            Category(domain="", value="Default Domain"),
            Category(domain=" POST_TAG ", value="golang"),
            Category(domain="post_tag", value="   "),
            Category(domain="post_format", value="aside"),
            Category(domain="Category", value="Tech"),
        ]
    )
    ext = CategoryExtractor()
    assert ext.extract_categories(item) == ["News", "Default Domain", "Tech"]
    assert ext.extract_tags(item) == ["golang"]
    assert ext.extract_categories(Item()) == []


def test_featured_image_resolution_order():
    index = AttachmentIndex(
        urls_by_id={555: "https://cdn/thumb.png"},
        urls_by_parent={200: ["https://cdn/first.png", "https://cdn/second.png"]},
    )
    ext = FeaturedImageExtractor()

    banner = _item(meta=[("_thumbnail_id", "555"), ("banner_old", "https://cdn/banner.png")], post_id=200)
    assert ext.extract(banner, index) == "https://cdn/banner.png"

    thumb = _item(meta=[("_thumbnail_id", "555")], post_id=200)
    assert ext.extract(thumb, index) == "https://cdn/thumb.png"

    bad_thumb = _item(meta=[("_thumbnail_id", "abc")], post_id=200)
    assert ext.extract(bad_thumb, index) == "https://cdn/first.png"

    unknown_thumb = _item(meta=[("_thumbnail_id", "999")], post_id=200)
    assert ext.extract(unknown_thumb, index) == "https://cdn/first.png"

    assert ext.extract(_item(post_id=1), index) == ""


def test_default_filter_and_empty_criteria():
    published = Item(post_type="post", status="publish")
    draft = Item(post_type="post", status="draft")
    page = Item(post_type="page", status="publish")

    default = DefaultFilter()
    assert default.should_include(published)
    assert not default.should_include(draft)
    assert not default.should_include(page)

    any_status = DefaultFilter(status="")
    assert any_status.should_include(draft)
    assert DefaultFilter(post_type="page").should_include(page)
