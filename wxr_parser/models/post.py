from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """A WordPress post parsed from a WXR export, normalized and ready to use.

    Records are built once by :class:`wxr_parser.parser.WXRParser` and never
    mutated afterwards.  ``categories``, ``tags`` and ``meta`` are always
    containers, even when the source item had no data for them.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title_rendered: str = ""
    content_rendered: str = ""
    slug: str = ""
    link: str = ""
    excerpt: str = ""
    author: str = ""
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    date: str = ""
    modified_date: str = ""
    featured_image: str = ""
    guid: str = ""
    parent_id: int = 0
    meta: dict[str, str] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
