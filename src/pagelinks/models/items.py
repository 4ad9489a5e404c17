"""Renderable pagination item model."""

from collections.abc import Callable
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from pagelinks.models.config import PaginationConfig
from pagelinks.utils.constants import (
    TOKEN_CURRENT_PAGE,
    TOKEN_PAGE_NUMBER,
    TOKEN_TOTAL_PAGES,
    TOKEN_URL,
)
from pagelinks.utils.templating import TemplateRenderer, render_token_template

PageUrlResolver = Callable[[int], str]


class ItemKind(str, Enum):
    PREV = "prev"
    FIRST = "first"
    NUMBER = "number"
    CURRENT_NUMBER = "current_number"
    LIMITER = "limiter"
    LAST = "last"
    NEXT = "next"
    CURRENT_PAGE_TEXT = "current_page_text"


NUMBER_SEQUENCE_KINDS: Final[frozenset[ItemKind]] = frozenset(
    {ItemKind.NUMBER, ItemKind.CURRENT_NUMBER, ItemKind.LIMITER}
)

# Which configuration option holds the HTML template of each item kind.
TEMPLATE_OPTIONS: Final[dict[ItemKind, str]] = {
    ItemKind.PREV: "prev_html",
    ItemKind.FIRST: "first_html",
    ItemKind.NUMBER: "number_html",
    ItemKind.CURRENT_NUMBER: "current_number_html",
    ItemKind.LIMITER: "limiter_html",
    ItemKind.LAST: "last_html",
    ItemKind.NEXT: "next_html",
    ItemKind.CURRENT_PAGE_TEXT: "current_page_html",
}


class PageItem(BaseModel):
    """A single renderable unit of a pagination control."""

    model_config = ConfigDict(frozen=True)

    kind: ItemKind = Field(..., description="Item kind tag")
    page_index: StrictInt | None = Field(
        None,
        description="0-based page index the item links to, if any",
    )
    display_label: StrictStr | None = Field(
        None,
        description="Page identifier shown for number items",
    )

    @property
    def in_number_sequence(self) -> bool:
        return self.kind in NUMBER_SEQUENCE_KINDS

    def template(self, config: PaginationConfig) -> str:
        """Return the HTML template configured for this item's kind."""
        option_name = TEMPLATE_OPTIONS[self.kind]
        template: str = getattr(config, option_name)
        return template

    def tokens(
        self,
        config: PaginationConfig,
        get_page_url: PageUrlResolver,
    ) -> dict[str, str]:
        """
        Build the template tokens for this item.

        CURRENT_PAGE and TOTAL_PAGES are always present. URL is present only
        for items pointing at a page, PAGE_NUMBER only for labelled items.
        """
        tokens: dict[str, str] = {
            TOKEN_CURRENT_PAGE: str(config.current_page_index + 1),
            TOKEN_TOTAL_PAGES: str(config.total_pages),
        }

        if self.page_index is not None:
            tokens[TOKEN_URL] = get_page_url(self.page_index)

        if self.display_label is not None:
            tokens[TOKEN_PAGE_NUMBER] = self.display_label

        return tokens

    def render(
        self,
        config: PaginationConfig,
        get_page_url: PageUrlResolver,
        render_template: TemplateRenderer = render_token_template,
    ) -> str:
        """Render the item's HTML from its template and tokens."""
        return render_template(
            self.template(config),
            self.tokens(config, get_page_url),
        )
