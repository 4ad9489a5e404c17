"""
Pagination facade.

Wires the configuration, collection, renderer, URL style and sanitizer
together for one render call.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from aws_lambda_powertools import Logger

from pagelinks.models.config import PaginationConfig, build_config
from pagelinks.models.errors import ConfigurationError
from pagelinks.models.items import PageItem, PageUrlResolver
from pagelinks.renderers.html import HtmlFilter, HtmlRenderer, ItemRenderer, RenderResult
from pagelinks.resolvers.collection import ItemCollection, PaginationCollection
from pagelinks.resolvers.page_set import PageSetResolver
from pagelinks.styles.urls import CallbackStyle, PaginationStyle
from pagelinks.utils.constants import DEFAULT_OPTIONS
from pagelinks.utils.templating import Sanitizer, sanitize_html

logger = Logger(utc=True)

OptionFilter = Callable[[dict[str, Any]], dict[str, Any]]


class Pagination:
    """
    Configured pagination control.

    Collaborators are injected through the constructor:
    - style / get_page_url: page URL strategy (exactly one is required)
    - resolver: page-number selection strategy
    - collection: item ordering
    - renderer: HTML concatenation
    - html_filters: callbacks rewriting HTML at each render step
    - option_filters: callbacks rewriting the defaults before merging
    - sanitizer: applied once to the final fragment

    Example:
        Pagination(
            {"total_pages": 10, "current_page": 3, "enable_numbers": True},
            get_page_url=lambda idx: f"/list/?page={idx + 1}",
        ).render()
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        style: PaginationStyle | None = None,
        get_page_url: PageUrlResolver | None = None,
        defaults: Mapping[str, Any] | None = None,
        option_filters: Iterable[OptionFilter] = (),
        resolver: PageSetResolver | None = None,
        collection: ItemCollection | None = None,
        renderer: ItemRenderer | None = None,
        html_filters: Iterable[HtmlFilter] = (),
        sanitizer: Sanitizer = sanitize_html,
    ) -> None:
        if (style is None) == (get_page_url is None):
            raise ConfigurationError(
                message="Exactly one of style or get_page_url must be provided",
            )

        self.style: PaginationStyle = style or CallbackStyle(get_page_url)
        self.config: PaginationConfig = build_config(
            options,
            defaults=self._filtered_defaults(defaults, option_filters),
        )
        self.collection: ItemCollection = collection or PaginationCollection(resolver)
        self.renderer: ItemRenderer = renderer or HtmlRenderer(html_filters)
        self.sanitizer = sanitizer

    @staticmethod
    def _filtered_defaults(
        defaults: Mapping[str, Any] | None,
        option_filters: Iterable[OptionFilter],
    ) -> dict[str, Any]:
        merged: dict[str, Any] = dict(DEFAULT_OPTIONS)
        merged.update(defaults or {})

        for option_filter in option_filters:
            merged = option_filter(merged)

        return merged

    def items(self) -> list[PageItem]:
        """Return the ordered items for the current configuration."""
        return self.collection.build(self.config)

    def render_result(self, *, strict: bool = False) -> RenderResult:
        """Render the fragment without sanitizing it."""
        result = self.renderer.render(
            self.items(),
            self.config,
            self.style.page_url,
            strict=strict,
        )

        if not result.ok:
            logger.warning(
                "Pagination rendered with failed items",
                extra={
                    "failed_count": len(result.failures),
                    "positions": [failure.position for failure in result.failures],
                },
            )
        return result

    def render(self, *, strict: bool = False) -> str:
        """Render and sanitize the pagination fragment."""
        return self.sanitizer(self.render_result(strict=strict).html)


def render_pagination(
    options: Mapping[str, Any] | None,
    get_page_url: PageUrlResolver,
    **kwargs: Any,
) -> str:
    """Render a pagination fragment in one call.

    Extra keyword arguments are passed to `Pagination`.
    """
    return Pagination(options, get_page_url=get_page_url, **kwargs).render()
