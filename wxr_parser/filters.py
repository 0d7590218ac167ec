from __future__ import annotations

from typing import Protocol, runtime_checkable

from wxr_parser.models.wxr_document import Item


@runtime_checkable
class Filter(Protocol):
    def should_include(self, item: Item) -> bool: ...


class DefaultFilter:
    """Include items matching ``post_type`` and ``status``.

    An empty criterion matches any value, so ``DefaultFilter(status="")``
    keeps drafts and ``DefaultFilter(post_type="page")`` selects pages.
    """

    def __init__(self, post_type: str = "post", status: str = "publish") -> None:
        self.post_type = post_type
        self.status = status

    def should_include(self, item: Item) -> bool:
        if self.post_type and item.post_type != self.post_type:
            return False
        if self.status and item.status != self.status:
            return False
        return True

    def __repr__(self) -> str:
        return f"DefaultFilter(post_type={self.post_type!r}, status={self.status!r})"
