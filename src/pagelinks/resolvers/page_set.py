"""
Page-number selection for pagination controls.

Computes which page indices are shown as number links around the current
page, and where "..." limiters are inserted between non-contiguous runs.
"""

from collections.abc import Sequence
from typing import NamedTuple, Protocol

from pagelinks.models.errors import ConfigurationError
from pagelinks.utils.constants import (
    MIN_LARGE_PAGE_NUMBER_INTERVAL,
    MIN_TOTAL_PAGES,
    UNLIMITED_NUMBERS,
)


class ResolvedPage(NamedTuple):
    """One entry of a resolved page-number sequence.

    Limiter entries carry no page index.
    """

    page_idx: int | None
    is_current: bool
    is_limiter: bool


LIMITER = ResolvedPage(page_idx=None, is_current=False, is_limiter=True)


class PageSetResolver(Protocol):
    """Protocol for page-number selection strategies."""

    def resolve(
        self,
        current_page_idx: int,
        total_pages: int,
        number_limit: int,
        large_limit: int = 0,
        large_interval: int = MIN_LARGE_PAGE_NUMBER_INTERVAL,
    ) -> list[ResolvedPage]: ...


class WindowPageSetResolver:
    """
    Show a window of pages around the current one, plus large-interval jumps.

    Selection rules:
    - number_limit == -1 shows every page and never inserts limiters
    - otherwise the window [current - number_limit, current + number_limit]
      is shown, clamped to the valid range
    - for k = 1..large_limit, the pages current +/- k * large_interval are
      added when they exist
    - a single limiter replaces every gap wider than one page

    Example:
        resolve(current_page_idx=10, total_pages=20, number_limit=1,
                large_limit=1, large_interval=5)

        → 5, ..., 9, [10], 11, ..., 15
    """

    def resolve(
        self,
        current_page_idx: int,
        total_pages: int,
        number_limit: int,
        large_limit: int = 0,
        large_interval: int = MIN_LARGE_PAGE_NUMBER_INTERVAL,
    ) -> list[ResolvedPage]:
        """
        Resolve the ordered page-number sequence.

        Args:
            current_page_idx: 0-based index of the current page
            total_pages: Total number of pages (at least 1)
            number_limit: Pages shown on each side of the current one,
                -1 for all pages
            large_limit: Large-interval pages shown on each side
            large_interval: Distance between large-interval pages

        Returns:
            Entries ordered by page index, with limiter entries in the gaps

        Raises:
            ConfigurationError: If any argument is out of range
        """
        self.validate(
            current_page_idx,
            total_pages,
            number_limit,
            large_limit,
            large_interval,
        )

        if number_limit == UNLIMITED_NUMBERS:
            indices: Sequence[int] = range(total_pages)
        else:
            indices = sorted(
                self._candidates(
                    current_page_idx,
                    total_pages,
                    number_limit,
                    large_limit,
                    large_interval,
                )
            )

        return self._with_limiters(indices, current_page_idx)

    @staticmethod
    def validate(
        current_page_idx: int,
        total_pages: int,
        number_limit: int,
        large_limit: int,
        large_interval: int,
    ) -> None:
        """Reject resolver input that the configuration layer should have clamped."""
        if total_pages < MIN_TOTAL_PAGES:
            raise ConfigurationError(
                message=f"Total pages must be at least {MIN_TOTAL_PAGES}",
                details={"total_pages": total_pages},
            )

        if not 0 <= current_page_idx < total_pages:
            raise ConfigurationError(
                message="Current page index is out of range",
                details={
                    "current_page_idx": current_page_idx,
                    "total_pages": total_pages,
                },
            )

        if number_limit < UNLIMITED_NUMBERS:
            raise ConfigurationError(
                message=f"Number limit must be at least {UNLIMITED_NUMBERS}",
                details={"number_limit": number_limit},
            )

        if large_limit < 0:
            raise ConfigurationError(
                message="Large page number limit must be zero or positive",
                details={"large_limit": large_limit},
            )

        if large_interval < MIN_LARGE_PAGE_NUMBER_INTERVAL:
            raise ConfigurationError(
                message=(
                    "Large page number interval must be at least "
                    f"{MIN_LARGE_PAGE_NUMBER_INTERVAL}"
                ),
                details={"large_interval": large_interval},
            )

    @staticmethod
    def _candidates(
        current_page_idx: int,
        total_pages: int,
        number_limit: int,
        large_limit: int,
        large_interval: int,
    ) -> set[int]:
        last_idx = total_pages - 1

        start = max(current_page_idx - number_limit, 0)
        end = min(current_page_idx + number_limit, last_idx)
        candidates = set(range(start, end + 1))
        candidates.add(current_page_idx)

        # Past this step both current +/- k * interval fall outside the pages.
        max_steps = min(large_limit, last_idx // large_interval)

        for k in range(1, max_steps + 1):
            for idx in (
                current_page_idx - k * large_interval,
                current_page_idx + k * large_interval,
            ):
                if 0 <= idx <= last_idx:
                    candidates.add(idx)

        return candidates

    @staticmethod
    def _with_limiters(
        indices: Sequence[int],
        current_page_idx: int,
    ) -> list[ResolvedPage]:
        resolved: list[ResolvedPage] = []
        previous: int | None = None

        for idx in indices:
            if previous is not None and idx - previous > 1:
                resolved.append(LIMITER)

            resolved.append(
                ResolvedPage(
                    page_idx=idx,
                    is_current=idx == current_page_idx,
                    is_limiter=False,
                )
            )
            previous = idx

        return resolved
