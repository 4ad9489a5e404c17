"""
URL strategies for pagination links.

Every style maps a 0-based page index to the URL of that page.
"""

from typing import Protocol
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pagelinks.models.items import PageUrlResolver
from pagelinks.utils.constants import DEFAULT_PATH_SEGMENT, DEFAULT_QUERY_PARAM


class PaginationStyle(Protocol):
    """Protocol for page URL strategies."""

    def page_url(self, page_index: int) -> str: ...


class CallbackStyle:
    """Delegate URL generation to a callback supplied by the application."""

    def __init__(self, get_page_url: PageUrlResolver) -> None:
        self._get_page_url = get_page_url

    def page_url(self, page_index: int) -> str:
        return self._get_page_url(page_index)


class QueryStringStyle:
    """
    Paginate through a query-string parameter.

    Other query parameters are preserved. The first page drops the
    parameter so that it keeps its canonical URL.

    Example:
        QueryStringStyle("/posts?tag=news").page_url(2)
        → "/posts?tag=news&page=3"
    """

    def __init__(self, base_url: str, param: str = DEFAULT_QUERY_PARAM) -> None:
        self.base_url = base_url
        self.param = param

    def page_url(self, page_index: int) -> str:
        parts = urlsplit(self.base_url)
        query = [
            (key, value)
            for key, value in parse_qsl(parts.query, keep_blank_values=True)
            if key != self.param
        ]

        if page_index > 0:
            query.append((self.param, str(page_index + 1)))

        return urlunsplit(parts._replace(query=urlencode(query)))


class PathStyle:
    """
    Paginate through a path segment.

    Any existing `/<segment>/<n>/` suffix on the base URL is replaced.

    Example:
        PathStyle("/blog/").page_url(1)
        → "/blog/page/2/"
    """

    def __init__(self, base_url: str, segment: str = DEFAULT_PATH_SEGMENT) -> None:
        self.base_url = base_url
        self.segment = segment

    def page_url(self, page_index: int) -> str:
        parts = urlsplit(self.base_url)
        path = self._strip_page_suffix(parts.path)

        if page_index > 0:
            path = f"{path.rstrip('/')}/{self.segment}/{page_index + 1}/"

        return urlunsplit(parts._replace(path=path))

    def _strip_page_suffix(self, path: str) -> str:
        segments = path.rstrip("/").split("/")
        if (
            len(segments) >= 2
            and segments[-2] == self.segment
            and segments[-1].isdigit()
        ):
            return "/".join(segments[:-2]) + "/"
        return path
