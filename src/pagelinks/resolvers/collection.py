"""
Ordering of pagination items into the final render sequence.
"""

from typing import Protocol

from aws_lambda_powertools import Logger

from pagelinks.models.config import PaginationConfig
from pagelinks.models.items import ItemKind, PageItem
from pagelinks.resolvers.page_set import PageSetResolver, WindowPageSetResolver

logger = Logger(utc=True)


class ItemCollection(Protocol):
    """Protocol for objects that turn a configuration into renderable items."""

    def build(self, config: PaginationConfig) -> list[PageItem]: ...


class PaginationCollection:
    """
    Build the ordered list of pagination items.

    Final order:
    [Prev] [First] [Numbers and limiters] [Last] [Next] [CurrentPageText]

    Suppression rules:
    - Prev/First need a page before the current one
    - Next/Last need a page after the current one
    - First/Last are not deduplicated against the number sequence
    """

    def __init__(self, resolver: PageSetResolver | None = None) -> None:
        self._resolver: PageSetResolver = resolver or WindowPageSetResolver()

    def build(self, config: PaginationConfig) -> list[PageItem]:
        current_idx = config.current_page_index
        last_idx = config.total_pages - 1
        has_previous = current_idx > 0
        has_next = current_idx < last_idx

        items: list[PageItem] = []

        if config.enable_prev and has_previous:
            items.append(self._page_item(ItemKind.PREV, current_idx - 1, config))

        if config.enable_first and has_previous:
            items.append(self._page_item(ItemKind.FIRST, 0, config))

        if config.enable_numbers:
            items.extend(self.number_items(config))

        if config.enable_last and has_next:
            items.append(self._page_item(ItemKind.LAST, last_idx, config))

        if config.enable_next and has_next:
            items.append(self._page_item(ItemKind.NEXT, current_idx + 1, config))

        if config.enable_current_page_text:
            items.append(PageItem(kind=ItemKind.CURRENT_PAGE_TEXT))

        logger.debug(
            "Built pagination items",
            extra={
                "total_pages": config.total_pages,
                "current_page": config.current_page,
                "item_count": len(items),
            },
        )
        return items

    def number_items(self, config: PaginationConfig) -> list[PageItem]:
        """Resolve the page-number sequence into Number/CurrentNumber/Limiter items."""
        resolved = self._resolver.resolve(
            config.current_page_index,
            config.total_pages,
            config.number_limit,
            config.large_page_number_limit,
            config.large_page_number_interval,
        )

        items: list[PageItem] = []
        for entry in resolved:
            if entry.is_limiter or entry.page_idx is None:
                items.append(PageItem(kind=ItemKind.LIMITER))
                continue

            kind = ItemKind.CURRENT_NUMBER if entry.is_current else ItemKind.NUMBER
            items.append(self._page_item(kind, entry.page_idx, config))

        return items

    @staticmethod
    def _page_item(
        kind: ItemKind,
        page_index: int,
        config: PaginationConfig,
    ) -> PageItem:
        return PageItem(
            kind=kind,
            page_index=page_index,
            display_label=str(config.page_identifiers[page_index]),
        )
