"""
Data models for WXR documents and the normalized posts extracted from them.

* :mod:`wxr_parser.models.wxr_document` – raw channel/item tree decoded from XML
* :mod:`wxr_parser.models.post` – the output :class:`Post` record
"""

from .post import Post
from .wxr_document import Author, Category, Channel, Item, PostMeta, WxrDocument

__all__ = ["Author", "Category", "Channel", "Item", "Post", "PostMeta", "WxrDocument"]
