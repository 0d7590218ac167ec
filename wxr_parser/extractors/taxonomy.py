from __future__ import annotations

from typing import Iterable, List

from wxr_parser.models.wxr_document import Category, Item

CATEGORY_DOMAINS = ("category", "")
TAG_DOMAINS = ("post_tag",)


def _labels(categories: Iterable[Category], domains: Iterable[str]) -> List[str]:
    """
    Collect the trimmed values of entries whose domain is one of ``domains``.

    - Domains compare case-insensitively after trimming
    - Blank values are dropped
    - Document order is preserved, duplicates included
    """
    wanted = set(domains)
    result: List[str] = []
    for category in categories:
        if category.domain.strip().lower() not in wanted:
            continue
        name = category.value.strip()
        if name:
            result.append(name)
    return result


class CategoryExtractor:
    """Splits an item's ``<category>`` entries into categories and tags.

    Entries without a ``domain`` attribute count as categories.
    """

    def extract_categories(self, item: Item) -> List[str]:
        return _labels(item.categories, CATEGORY_DOMAINS)

    def extract_tags(self, item: Item) -> List[str]:
        return _labels(item.categories, TAG_DOMAINS)
