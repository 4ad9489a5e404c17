"""Pagination configuration model and option merging."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from pagelinks.utils.constants import (
    DEFAULT_CURRENT_NUMBER_HTML,
    DEFAULT_CURRENT_PAGE_HTML,
    DEFAULT_FIRST_HTML,
    DEFAULT_LAST_HTML,
    DEFAULT_LIMITER_HTML,
    DEFAULT_NEXT_HTML,
    DEFAULT_NUMBER_HTML,
    DEFAULT_NUMBERS_WRAPPER_AFTER,
    DEFAULT_NUMBERS_WRAPPER_BEFORE,
    DEFAULT_OPTIONS,
    DEFAULT_PREV_HTML,
    DEFAULT_WRAPPER_AFTER,
    DEFAULT_WRAPPER_BEFORE,
    MIN_CURRENT_PAGE,
    MIN_LARGE_PAGE_NUMBER_INTERVAL,
    MIN_TOTAL_PAGES,
    UNLIMITED_NUMBERS,
)
from pagelinks.utils.validators import configuration_error, validate_options


class PaginationConfig(BaseModel):
    """
    Immutable snapshot of every pagination rendering option.

    The field table is the complete option schema: each option has a type,
    a default and (where needed) a validator. Unknown option names are
    ignored.

    Clamping rules:
    - total_pages below 1 becomes 1
    - current_page is clamped into [1, total_pages]
    - when `pages` is given, total_pages is its length
    - large page number limit/interval take the absolute value
    """

    model_config = ConfigDict(frozen=True, extra="ignore", validate_default=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise configuration_error(exc, model_name=type(self).__name__) from exc

    # Field order matters: later validators read earlier values.
    pages: tuple[Any, ...] | None = Field(
        None,
        description="Optional page identifiers used instead of 1..total_pages",
    )
    total_pages: int = Field(MIN_TOTAL_PAGES, description="Total number of pages")
    current_page: int = Field(MIN_CURRENT_PAGE, description="1-based current page")

    enable_prev: bool = Field(True, description="Render the previous page link")
    enable_next: bool = Field(True, description="Render the next page link")
    enable_first: bool = Field(False, description="Render the first page link")
    enable_last: bool = Field(False, description="Render the last page link")
    enable_numbers: bool = Field(False, description="Render page number links")
    enable_current_page_text: bool = Field(
        False,
        description='Render the "Page X of Y" text',
    )

    number_limit: int = Field(
        UNLIMITED_NUMBERS,
        ge=UNLIMITED_NUMBERS,
        description="Page numbers on each side of the current one (-1 = all)",
    )
    large_page_number_limit: int = Field(
        0,
        description="Large page number links on each side of the current one",
    )
    large_page_number_interval: int = Field(
        10,
        description="Distance in pages between large page number links",
    )

    wrapper_before: str = DEFAULT_WRAPPER_BEFORE
    wrapper_after: str = DEFAULT_WRAPPER_AFTER
    numbers_wrapper_before: str = DEFAULT_NUMBERS_WRAPPER_BEFORE
    numbers_wrapper_after: str = DEFAULT_NUMBERS_WRAPPER_AFTER

    prev_html: str = DEFAULT_PREV_HTML
    next_html: str = DEFAULT_NEXT_HTML
    first_html: str = DEFAULT_FIRST_HTML
    last_html: str = DEFAULT_LAST_HTML
    number_html: str = DEFAULT_NUMBER_HTML
    current_number_html: str = DEFAULT_CURRENT_NUMBER_HTML
    limiter_html: str = DEFAULT_LIMITER_HTML
    current_page_html: str = DEFAULT_CURRENT_PAGE_HTML

    @field_validator("pages", mode="before")
    @classmethod
    def normalize_pages(cls, value: Any) -> tuple[Any, ...] | None:
        """Normalize page identifiers into a tuple.

        Accepts:
        - None (sequential pages)
        - a mapping (its values are used, keys are dropped)
        - any non-string iterable
        - a single scalar identifier
        """
        if value is None:
            return None

        if isinstance(value, Mapping):
            return tuple(value.values())

        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return tuple(value)

        return (value,)

    @field_validator("total_pages")
    @classmethod
    def clamp_total_pages(cls, value: int, info: ValidationInfo) -> int:
        pages = info.data.get("pages")
        if pages is not None:
            value = len(pages)

        return max(value, MIN_TOTAL_PAGES)

    @field_validator("current_page")
    @classmethod
    def clamp_current_page(cls, value: int, info: ValidationInfo) -> int:
        total_pages = info.data.get("total_pages", MIN_TOTAL_PAGES)
        return min(max(value, MIN_CURRENT_PAGE), total_pages)

    @field_validator(
        "enable_prev",
        "enable_next",
        "enable_first",
        "enable_last",
        "enable_numbers",
        "enable_current_page_text",
        mode="before",
    )
    @classmethod
    def coerce_flag(cls, value: Any) -> Any:
        # Strings go through pydantic's parsing so "false" stays False.
        if isinstance(value, str):
            return value
        return bool(value)

    @field_validator("large_page_number_limit")
    @classmethod
    def absolute_large_limit(cls, value: int) -> int:
        return abs(value)

    @field_validator("large_page_number_interval")
    @classmethod
    def absolute_large_interval(cls, value: int) -> int:
        return max(abs(value), MIN_LARGE_PAGE_NUMBER_INTERVAL)

    @property
    def current_page_index(self) -> int:
        """0-based index of the current page."""
        return self.current_page - 1

    @property
    def page_identifiers(self) -> tuple[Any, ...]:
        """Explicit page identifiers, or 1..total_pages when none are set."""
        if self.pages:
            return self.pages
        return tuple(range(1, self.total_pages + 1))

    def with_options(self, **overrides: Any) -> "PaginationConfig":
        """Return a new validated snapshot with the given options replaced.

        Setting total_pages without pages drops explicit page identifiers.
        """
        current = self.model_dump()
        if "total_pages" in overrides and "pages" not in overrides:
            current["pages"] = None

        return build_config(overrides, defaults=current)


def build_config(
    options: Mapping[str, Any] | None = None,
    defaults: Mapping[str, Any] | None = None,
) -> PaginationConfig:
    """
    Merge option layers and validate them into a PaginationConfig.

    Precedence (lowest to highest):
    1. Library defaults (DEFAULT_OPTIONS)
    2. Application defaults (`defaults`)
    3. Caller options (`options`)

    Args:
        options: Caller-supplied options for this render call
        defaults: Application-level defaults

    Returns:
        Validated, immutable configuration snapshot

    Raises:
        ConfigurationError: If any option fails validation
    """
    merged: dict[str, Any] = dict(DEFAULT_OPTIONS)
    merged.update(defaults or {})
    merged.update(options or {})

    return validate_options(PaginationConfig, merged)
