"""Configurable HTML pagination controls."""

from pagelinks.models.config import PaginationConfig, build_config
from pagelinks.models.errors import ConfigurationError, ItemRenderError, PaginationError
from pagelinks.models.items import ItemKind, PageItem
from pagelinks.pagination import Pagination, render_pagination
from pagelinks.renderers.html import HtmlRenderer, RenderResult, RenderStep
from pagelinks.resolvers.collection import PaginationCollection
from pagelinks.resolvers.page_set import ResolvedPage, WindowPageSetResolver
from pagelinks.styles.urls import CallbackStyle, PathStyle, QueryStringStyle

__version__ = "1.0.0"
__description__ = "Configurable HTML pagination controls for page templates"

__all__ = [
    "CallbackStyle",
    "ConfigurationError",
    "HtmlRenderer",
    "ItemKind",
    "ItemRenderError",
    "PageItem",
    "Pagination",
    "PaginationCollection",
    "PaginationConfig",
    "PaginationError",
    "PathStyle",
    "QueryStringStyle",
    "RenderResult",
    "RenderStep",
    "ResolvedPage",
    "WindowPageSetResolver",
    "build_config",
    "render_pagination",
]
