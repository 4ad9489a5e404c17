"""Global constants used throughout the package.

This module centralizes the error codes, default option values, HTML templates
and token names shared by the configuration, resolver and renderer modules.
"""

from types import MappingProxyType
from typing import Any, Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
ERROR_CODE_ITEM_RENDER_FAILED = "ITEM_RENDER_FAILED"

# ============================================================================
# Number Limits
# ============================================================================

# number_limit value meaning "show every page number"
UNLIMITED_NUMBERS = -1

MIN_TOTAL_PAGES = 1
MIN_CURRENT_PAGE = 1
MIN_LARGE_PAGE_NUMBER_INTERVAL = 1

# ============================================================================
# Template Tokens
# ============================================================================

TOKEN_URL = "URL"
TOKEN_PAGE_NUMBER = "PAGE_NUMBER"
TOKEN_CURRENT_PAGE = "CURRENT_PAGE"
TOKEN_TOTAL_PAGES = "TOTAL_PAGES"

# ============================================================================
# Default HTML Templates
# ============================================================================

DEFAULT_WRAPPER_BEFORE = '<div class="paging">'
DEFAULT_WRAPPER_AFTER = "</div>"
DEFAULT_NUMBERS_WRAPPER_BEFORE = "<ul>"
DEFAULT_NUMBERS_WRAPPER_AFTER = "</ul>"

DEFAULT_PREV_HTML = '<a href="{URL}" class="paging-prev"></a>'
DEFAULT_NEXT_HTML = '<a href="{URL}" class="paging-next"></a>'
DEFAULT_FIRST_HTML = '<a href="{URL}" class="paging-first"></a>'
DEFAULT_LAST_HTML = '<a href="{URL}" class="paging-last"></a>'

DEFAULT_NUMBER_HTML = '<li><a href="{URL}">{PAGE_NUMBER}</a></li>'
DEFAULT_CURRENT_NUMBER_HTML = (
    '<li class="current"><a href="{URL}">{PAGE_NUMBER}</a></li>'
)
DEFAULT_LIMITER_HTML = '<li class="paging-spacer">...</li>'
DEFAULT_CURRENT_PAGE_HTML = (
    '<span class="paging-label">Page {CURRENT_PAGE} of {TOTAL_PAGES}</span>'
)

# ============================================================================
# Default Options
# ============================================================================

DEFAULT_OPTIONS: Final[MappingProxyType[str, Any]] = MappingProxyType(
    {
        "total_pages": 1,
        "current_page": 1,
        "pages": None,
        "enable_prev": True,
        "enable_next": True,
        "enable_first": False,
        "enable_last": False,
        "enable_numbers": False,
        "enable_current_page_text": False,
        "number_limit": UNLIMITED_NUMBERS,
        "large_page_number_limit": 0,
        "large_page_number_interval": 10,
        "wrapper_before": DEFAULT_WRAPPER_BEFORE,
        "wrapper_after": DEFAULT_WRAPPER_AFTER,
        "numbers_wrapper_before": DEFAULT_NUMBERS_WRAPPER_BEFORE,
        "numbers_wrapper_after": DEFAULT_NUMBERS_WRAPPER_AFTER,
        "prev_html": DEFAULT_PREV_HTML,
        "next_html": DEFAULT_NEXT_HTML,
        "first_html": DEFAULT_FIRST_HTML,
        "last_html": DEFAULT_LAST_HTML,
        "number_html": DEFAULT_NUMBER_HTML,
        "current_number_html": DEFAULT_CURRENT_NUMBER_HTML,
        "limiter_html": DEFAULT_LIMITER_HTML,
        "current_page_html": DEFAULT_CURRENT_PAGE_HTML,
    }
)

# ============================================================================
# URL Styles
# ============================================================================

DEFAULT_QUERY_PARAM = "page"
DEFAULT_PATH_SEGMENT = "page"
