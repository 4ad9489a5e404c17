"""
Template token substitution and output sanitizing.

Both functions are the default collaborators used by the renderer; either
can be replaced by the embedding application.
"""

import re
from collections.abc import Callable, Mapping

TemplateRenderer = Callable[[str, Mapping[str, str]], str]
Sanitizer = Callable[[str], str]

TOKEN_PATTERN = re.compile(r"\{(\w+)\}")


def render_token_template(template: str, tokens: Mapping[str, str]) -> str:
    """Replace each `{TOKEN}` in the template with its value.

    Substitution is literal and single-pass: no escaping is performed,
    unknown tokens are left untouched and token values are never
    substituted again.

    Example:
        render_token_template("Page {CURRENT_PAGE}", {"CURRENT_PAGE": "3"})
        → "Page 3"
    """
    return TOKEN_PATTERN.sub(
        lambda match: tokens.get(match.group(1), match.group(0)),
        template,
    )


def sanitize_html(html: str) -> str:
    """Default sanitizer: returns the fragment unchanged."""
    return html
