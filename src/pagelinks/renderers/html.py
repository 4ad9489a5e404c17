"""
HTML rendering of pagination items.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Final, Protocol

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field

from pagelinks.models.config import PaginationConfig
from pagelinks.models.errors import ItemRenderError
from pagelinks.models.items import ItemKind, PageItem, PageUrlResolver
from pagelinks.utils.templating import TemplateRenderer, render_token_template

logger = Logger(utc=True)


class RenderStep(str, Enum):
    """Points at which HTML filters are invoked."""

    ITEM = "item"
    NUMBERS = "numbers"
    OUTPUT = "output"


HtmlFilter = Callable[[RenderStep, str, PageItem | None], str]

LEADING_KINDS: Final[frozenset[ItemKind]] = frozenset({ItemKind.PREV, ItemKind.FIRST})


class ItemRenderFailure(BaseModel):
    """Describes one item that failed to render."""

    position: int = Field(..., description="Position of the item in the sequence")
    kind: ItemKind = Field(..., description="Kind of the failed item")
    page_index: int | None = Field(None, description="Page index of the failed item")
    error_type: str = Field(..., description="Exception class name")
    message: str = Field(..., description="Exception message")


class RenderResult(BaseModel):
    """Rendered fragment plus any isolated item failures."""

    html: str = Field(..., description="Rendered HTML fragment (unsanitized)")
    failures: list[ItemRenderFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class ItemRenderer(Protocol):
    """Protocol for renderers turning items into an HTML fragment."""

    def render(
        self,
        items: list[PageItem],
        config: PaginationConfig,
        get_page_url: PageUrlResolver,
        *,
        strict: bool = False,
    ) -> RenderResult: ...


def _log_item_error(
    message: str,
    *,
    position: int,
    item: PageItem,
    exc: Exception,
) -> None:
    """Log an item failure with consistent structure and full context."""
    logger.warning(
        message,
        extra={
            "position": position,
            "kind": item.kind.value,
            "page_index": item.page_index,
            "error": str(exc),
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )


class HtmlRenderer:
    """
    Concatenate item HTML between the configured wrapper strings.

    Output layout:
        wrapper_before
        + leading items (prev, first)
        + numbers_wrapper_before + number/limiter items + numbers_wrapper_after
        + trailing items (last, next, current page text)
        + wrapper_after

    The numbers wrappers are only emitted when page numbers are enabled.
    A failing item contributes an empty string and is reported in the
    result; the remaining items still render.
    """

    def __init__(
        self,
        html_filters: Iterable[HtmlFilter] = (),
        render_template: TemplateRenderer = render_token_template,
    ) -> None:
        self._html_filters: list[HtmlFilter] = list(html_filters)
        self._render_template = render_template

    def render(
        self,
        items: list[PageItem],
        config: PaginationConfig,
        get_page_url: PageUrlResolver,
        *,
        strict: bool = False,
    ) -> RenderResult:
        """
        Render the items into a single HTML fragment.

        Args:
            items: Ordered pagination items
            config: Configuration snapshot holding templates and wrappers
            get_page_url: Page index to URL callback
            strict: Raise on the first item failure instead of isolating it

        Returns:
            RenderResult with the fragment and any item failures

        Raises:
            ItemRenderError: In strict mode, when an item fails to render
        """
        leading: list[str] = []
        numbers: list[str] = []
        trailing: list[str] = []
        failures: list[ItemRenderFailure] = []

        for position, item in enumerate(items):
            html = self._render_item(
                position,
                item,
                config,
                get_page_url,
                failures,
                strict=strict,
            )

            if item.in_number_sequence:
                numbers.append(html)
            elif item.kind in LEADING_KINDS:
                leading.append(html)
            else:
                trailing.append(html)

        numbers_html = ""
        if config.enable_numbers:
            numbers_html = self._apply_filters(
                RenderStep.NUMBERS,
                config.numbers_wrapper_before
                + "".join(numbers)
                + config.numbers_wrapper_after,
                None,
            )

        output = (
            config.wrapper_before
            + "".join(leading)
            + numbers_html
            + "".join(trailing)
            + config.wrapper_after
        )

        return RenderResult(
            html=self._apply_filters(RenderStep.OUTPUT, output, None),
            failures=failures,
        )

    def _render_item(
        self,
        position: int,
        item: PageItem,
        config: PaginationConfig,
        get_page_url: PageUrlResolver,
        failures: list[ItemRenderFailure],
        *,
        strict: bool,
    ) -> str:
        try:
            html = item.render(config, get_page_url, self._render_template)
            return self._apply_filters(RenderStep.ITEM, html, item)

        except Exception as exc:
            _log_item_error(
                "Pagination item failed to render",
                position=position,
                item=item,
                exc=exc,
            )

            if strict:
                raise ItemRenderError(
                    message=f"Unable to render {item.kind.value} item",
                    details={
                        "position": position,
                        "kind": item.kind.value,
                        "page_index": item.page_index,
                    },
                ) from exc

            failures.append(
                ItemRenderFailure(
                    position=position,
                    kind=item.kind,
                    page_index=item.page_index,
                    error_type=type(exc).__name__,
                    message=str(exc),
                )
            )
            return ""

    def _apply_filters(
        self,
        step: RenderStep,
        html: str,
        item: PageItem | None,
    ) -> str:
        for html_filter in self._html_filters:
            html = html_filter(step, html, item)
        return html
