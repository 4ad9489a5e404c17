"""Unit tests for WindowPageSetResolver."""

import time

import pytest

from pagelinks.models.errors import ConfigurationError
from pagelinks.resolvers.page_set import LIMITER, ResolvedPage, WindowPageSetResolver


def _indices(resolved: list[ResolvedPage]) -> list[int | None]:
    return [entry.page_idx for entry in resolved]


class TestResolveScenarios:
    def test_window_without_limiters(self, resolver: WindowPageSetResolver) -> None:
        resolved = resolver.resolve(5, 10, 2)

        assert _indices(resolved) == [3, 4, 5, 6, 7]
        assert not any(entry.is_limiter for entry in resolved)

    def test_large_interval_pages_with_limiters(
        self,
        resolver: WindowPageSetResolver,
    ) -> None:
        resolved = resolver.resolve(10, 20, 1, large_limit=1, large_interval=5)

        assert resolved == [
            ResolvedPage(5, False, False),
            LIMITER,
            ResolvedPage(9, False, False),
            ResolvedPage(10, True, False),
            ResolvedPage(11, False, False),
            LIMITER,
            ResolvedPage(15, False, False),
        ]

    def test_single_page(self, resolver: WindowPageSetResolver) -> None:
        resolved = resolver.resolve(0, 1, 2)

        assert resolved == [ResolvedPage(0, True, False)]

    def test_zero_number_limit_shows_current_only(
        self,
        resolver: WindowPageSetResolver,
    ) -> None:
        resolved = resolver.resolve(4, 10, 0)

        assert resolved == [ResolvedPage(4, True, False)]

    def test_unlimited_shows_every_page(self, resolver: WindowPageSetResolver) -> None:
        resolved = resolver.resolve(3, 7, -1)

        assert _indices(resolved) == list(range(7))
        assert [entry.is_current for entry in resolved].count(True) == 1
        assert resolved[3].is_current is True

    def test_unlimited_ignores_large_pages(self, resolver: WindowPageSetResolver) -> None:
        resolved = resolver.resolve(0, 30, -1, large_limit=3, large_interval=10)

        assert len(resolved) == 30
        assert LIMITER not in resolved


class TestResolveBoundaries:
    def test_window_clamped_at_start(self, resolver: WindowPageSetResolver) -> None:
        assert _indices(resolver.resolve(0, 10, 2)) == [0, 1, 2]

    def test_window_clamped_at_end(self, resolver: WindowPageSetResolver) -> None:
        assert _indices(resolver.resolve(9, 10, 2)) == [7, 8, 9]

    def test_large_pages_out_of_range_are_dropped(
        self,
        resolver: WindowPageSetResolver,
    ) -> None:
        resolved = resolver.resolve(1, 5, 0, large_limit=2, large_interval=10)

        assert resolved == [ResolvedPage(1, True, False)]

    def test_huge_large_limit_stops_at_page_bounds(
        self,
        resolver: WindowPageSetResolver,
    ) -> None:
        started = time.perf_counter()
        resolved = resolver.resolve(5, 10, 0, large_limit=20_000_000, large_interval=1)
        elapsed = time.perf_counter() - started

        assert _indices(resolved) == list(range(10))
        assert elapsed < 0.5

    def test_large_pages_several_per_side(self, resolver: WindowPageSetResolver) -> None:
        resolved = resolver.resolve(20, 50, 0, large_limit=2, large_interval=10)

        assert _indices(resolved) == [0, None, 10, None, 20, None, 30, None, 40]

    def test_large_page_overlapping_window_is_deduplicated(
        self,
        resolver: WindowPageSetResolver,
    ) -> None:
        resolved = resolver.resolve(5, 20, 2, large_limit=1, large_interval=2)

        assert _indices(resolved) == [3, 4, 5, 6, 7]

    def test_gap_of_one_page_has_no_limiter(
        self,
        resolver: WindowPageSetResolver,
    ) -> None:
        resolved = resolver.resolve(5, 20, 1, large_limit=1, large_interval=2)

        assert _indices(resolved) == [3, 4, 5, 6, 7]

    def test_gap_of_two_pages_has_limiter(self, resolver: WindowPageSetResolver) -> None:
        resolved = resolver.resolve(5, 20, 0, large_limit=1, large_interval=2)

        assert _indices(resolved) == [3, None, 5, None, 7]


class TestResolveProperties:
    def test_sequence_invariants(self, resolver: WindowPageSetResolver) -> None:
        for total_pages in range(1, 13):
            for current in range(total_pages):
                for number_limit in (-1, 0, 1, 3):
                    for large_limit in (0, 1, 2):
                        for large_interval in (1, 3, 4):
                            resolved = resolver.resolve(
                                current,
                                total_pages,
                                number_limit,
                                large_limit,
                                large_interval,
                            )
                            pages = [e.page_idx for e in resolved if not e.is_limiter]
                            gaps = sum(1 for a, b in zip(pages, pages[1:]) if b - a > 1)
                            limiters = sum(1 for e in resolved if e.is_limiter)

                            assert pages == sorted(set(pages))
                            assert all(0 <= p < total_pages for p in pages)
                            assert current in pages
                            assert limiters == gaps
                            assert not resolved[0].is_limiter
                            assert not resolved[-1].is_limiter

    def test_resolve_is_idempotent(self, resolver: WindowPageSetResolver) -> None:
        first = resolver.resolve(10, 20, 1, 2, 4)
        second = resolver.resolve(10, 20, 1, 2, 4)

        assert first == second


class TestResolveValidation:
    def test_total_pages_below_one_raises(self, resolver: WindowPageSetResolver) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolver.resolve(0, 0, 2)

        assert exc_info.value.details == {"total_pages": 0}

    def test_number_limit_below_minus_one_raises(
        self,
        resolver: WindowPageSetResolver,
    ) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolver.resolve(0, 10, -2)

        assert "Number limit" in exc_info.value.message
        assert exc_info.value.error_code == "INVALID_CONFIGURATION"

    @pytest.mark.parametrize("current", [-1, 10])
    def test_current_out_of_range_raises(
        self,
        resolver: WindowPageSetResolver,
        current: int,
    ) -> None:
        with pytest.raises(ConfigurationError):
            resolver.resolve(current, 10, 2)

    def test_zero_large_interval_raises(self, resolver: WindowPageSetResolver) -> None:
        with pytest.raises(ConfigurationError):
            resolver.resolve(0, 10, 2, large_limit=1, large_interval=0)

    def test_negative_large_limit_raises(self, resolver: WindowPageSetResolver) -> None:
        with pytest.raises(ConfigurationError):
            resolver.resolve(0, 10, 2, large_limit=-1)
