from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


class PostMeta(BaseModel):
    """A ``wp:postmeta`` entry. Keys may repeat within one item."""

    key: str = ""
    value: str = ""


class Category(BaseModel):
    domain: str = ""
    nicename: str = ""
    value: str = ""


class Author(BaseModel):
    id: int = 0
    login: str = ""
    display_name: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _numeric(cls, v: Any) -> int:
        return _to_int(v)


class Item(BaseModel):
    """One ``<item>`` of the export: a post, page, attachment or any other type."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    link: str = ""
    guid: str = ""
    pub_date: str = ""
    creator: str = ""
    content_encoded: str = ""
    excerpt_encoded: str = ""
    post_id: int = 0
    post_date: str = ""
    post_date_gmt: str = ""
    post_modified: str = ""
    post_modified_gmt: str = ""
    post_parent: int = 0
    post_name: str = ""
    post_type: str = ""
    status: str = ""
    attachment_url: str = ""
    post_meta: list[PostMeta] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)

    @field_validator("post_id", "post_parent", mode="before")
    @classmethod
    def _numeric(cls, v: Any) -> int:
        # Absent or garbled numbers decode as zero.
        return _to_int(v)


class Channel(BaseModel):
    title: str = ""
    link: str = ""
    base_site_url: str = ""
    base_blog_url: str = ""
    items: list[Item] = Field(default_factory=list)
    authors: list[Author] = Field(default_factory=list)


class WxrDocument(BaseModel):
    root: str = "rss"
    channel: Channel = Field(default_factory=Channel)
