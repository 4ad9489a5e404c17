"""
Pytest configuration and fixtures for pagination tests.
"""

from collections.abc import Callable
from typing import Any

import pytest

from pagelinks.models.config import PaginationConfig, build_config
from pagelinks.resolvers.page_set import WindowPageSetResolver


@pytest.fixture
def page_url() -> Callable[[int], str]:
    """Deterministic URL callback: page index 0 -> /p/1."""

    def _url(page_index: int) -> str:
        return f"/p/{page_index + 1}"

    return _url


@pytest.fixture
def failing_page_url() -> Callable[[int], str]:
    """URL callback that fails for page index 2 only."""

    def _url(page_index: int) -> str:
        if page_index == 2:
            raise RuntimeError("No permalink for page 3")
        return f"/p/{page_index + 1}"

    return _url


@pytest.fixture
def make_config() -> Callable[..., PaginationConfig]:
    """
    Helper to build a validated configuration.

    Usage:
        config = make_config(total_pages=10, current_page=3)
    """

    def _make(**options: Any) -> PaginationConfig:
        return build_config(options)

    return _make


@pytest.fixture
def all_enabled() -> dict[str, Any]:
    """Options enabling every item kind."""
    return {
        "enable_prev": True,
        "enable_next": True,
        "enable_first": True,
        "enable_last": True,
        "enable_numbers": True,
        "enable_current_page_text": True,
    }


@pytest.fixture
def resolver() -> WindowPageSetResolver:
    return WindowPageSetResolver()
